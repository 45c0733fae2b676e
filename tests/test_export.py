from engine.projection import project
from export.csv_export import CSV_HEADERS, EXPORT_FILENAME, export_frame, projection_to_csv, write_csv


def test_header_order():
    assert CSV_HEADERS == [
        "Mês", "Receita ONGs", "Receita Empresas", "Receita Loja", "Receita Total",
        "Custos Fixos", "Custos Variáveis", "Custos Totais", "Lucro", "Margem (%)",
    ]
    assert EXPORT_FILENAME.endswith(".csv")


def test_line_and_field_counts(default_records):
    text = projection_to_csv(default_records)
    lines = text.split("\n")
    assert len(lines) == len(default_records) + 1
    assert all(len(line.split(",")) == len(CSV_HEADERS) for line in lines)
    assert not text.endswith("\n")


def test_first_data_row(default_records):
    lines = projection_to_csv(default_records).split("\n")
    assert lines[0] == ",".join(CSV_HEADERS)
    assert lines[1] == "Mês 1,1028,5447,5000,11475,15000,2869,17869,-6394,-55.7"


def test_undefined_margin_exported_as_na(zero_revenue_params):
    frame = export_frame(project(zero_revenue_params))
    assert list(frame.columns) == CSV_HEADERS
    assert list(frame["Margem (%)"]) == ["N/A", "N/A", "N/A"]
    lines = projection_to_csv(project(zero_revenue_params)).split("\n")
    assert [line.rsplit(",", 1)[1] for line in lines[1:]] == ["N/A", "N/A", "N/A"]


def test_empty_export_is_header_only():
    assert projection_to_csv([]) == ",".join(CSV_HEADERS)


def test_export_has_no_quoting(default_records):
    assert '"' not in projection_to_csv(default_records)


def test_single_month_export():
    from core.config import ProjectionParameters

    text = projection_to_csv(project(ProjectionParameters(projection_months=1)))
    assert len(text.split("\n")) == 2


def test_write_csv(tmp_path, default_records):
    path = write_csv(default_records, tmp_path / "out" / EXPORT_FILENAME)
    assert path.exists()
    assert path.read_text(encoding="utf-8") == projection_to_csv(default_records)
