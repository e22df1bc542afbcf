# ABOUTME: Tests for the Mexico City registry extractor and its field parsers
# ABOUTME: Rows mimic personasdesaparecidas.fgjcdmx.gob.mx, legends separated by non-breaking spaces

from datetime import date

import pytest

from rastreadora.core.models import State
from rastreadora.document import Document
from rastreadora.extraction.sites import cdmx


def _row(name: str = "ANA LÓPEZ", link: str = "ficha.php?id=1", status: str = "Localizada") -> str:
    data = (
        f"{name}<br>Edad:&nbsp;25 años<br>Fecha de desaparición:&nbsp;5 de mayo de 2022<br>"
        f'Lugar:&nbsp;Coyoacán<br>Estatus:&nbsp;{status}<br><a href="{link}">Ver ficha</a>'
    )
    return f'<tr><td><img src="fotos/1.jpg"></td><td>{data}</td></tr>'


def _page(*rows: str) -> Document:
    return Document.parse(f"<html><body><table><tbody>{''.join(rows)}</tbody></table></body></html>")


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("5 de mayo de 2022", date(2022, 5, 5)),
        ("12 de Diciembre de 2019", date(2019, 12, 12)),
        ("5 mayo 2022", None),
        ("32 de mayo de 2022", None),
        ("5 de may de 2022", None),
        ("1 de mayo de 99999999999", None),
    ],
)
def test_parse_cdmx_date(value, expected):
    assert cdmx.parse_cdmx_date(value) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [("Localizada", True), ("LOCALIZADO", True), ("No localizada", False), ("En búsqueda", False)],
)
def test_parse_cdmx_found(value, expected):
    assert cdmx.parse_cdmx_found(value) is expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [("25 años", 25), ("1 año", 1), ("sin dato", None), ("", None), ("2² años", None), ("-3 años", None)],
)
def test_parse_cdmx_age(value, expected):
    assert cdmx.parse_cdmx_age(value) == expected


def test_build_url():
    assert cdmx.build_url(3) == "https://personasdesaparecidas.fgjcdmx.gob.mx/listado.php?pa=3&re=100"


class TestExtract:
    """Test turning registry rows into posters"""

    def test_row_fields(self):
        outcome = cdmx.extract(_page(_row()))

        assert outcome.errors == {}
        poster = outcome.posters[0]
        assert poster.mp_name == "Ana López"
        assert poster.mp_age_when_disappeared == 25
        assert poster.missing_date == date(2022, 5, 5)
        assert poster.found is True
        assert poster.po_state is State.CIUDAD_DE_MEXICO
        assert str(poster.po_post_url) == "https://personasdesaparecidas.fgjcdmx.gob.mx/ficha.php?id=1"
        assert str(poster.po_poster_url) == "https://personasdesaparecidas.fgjcdmx.gob.mx/fotos/1.jpg"
        assert poster.alert_type is None

    def test_three_valid_entries_and_one_without_name(self):
        outcome = cdmx.extract(_page(_row("ANA"), _row(""), _row("LUIS"), _row("EVA", status="No localizada")))

        assert [poster.mp_name for poster in outcome.posters] == ["Ana", "Luis", "Eva"]
        assert outcome.errors == {2: "mp_name can't be empty"}
        assert outcome.posters[2].found is False

    def test_row_without_link(self):
        outcome = cdmx.extract(_page(_row(link="")))
        assert outcome.posters == []
        assert outcome.errors == {1: "po_post_url can't be empty"}

    def test_row_with_wrong_cell_count(self):
        outcome = cdmx.extract(_page("<tr><td>Sin datos</td></tr>", _row()))
        assert outcome.errors == {1: "entry has 1 td elements instead of 2"}
        assert len(outcome.posters) == 1

    def test_extract_is_idempotent(self):
        doc = _page(_row("ANA"), _row(""), _row("LUIS"))
        first = cdmx.extract(doc)
        second = cdmx.extract(doc)

        assert first == second
        assert first.model_dump_json() == second.model_dump_json()

    def test_rows_without_tbody(self):
        doc = Document.parse(f"<html><body><table>{_row('ANA')}{_row('LUIS')}</table></body></html>")
        outcome = cdmx.extract(doc)

        assert [poster.mp_name for poster in outcome.posters] == ["Ana", "Luis"]
        assert outcome.errors == {}

    def test_header_row_is_not_an_entry(self):
        doc = Document.parse(
            f"<table><thead><tr><th>Foto</th><th>Datos</th></tr></thead><tbody>{_row()}</tbody></table>"
        )
        outcome = cdmx.extract(doc)

        assert outcome.entries == 1
        assert outcome.errors == {}

    def test_date_with_out_of_range_year_is_left_empty(self):
        row = _row().replace("5 de mayo de 2022", "1 de mayo de 99999999999")
        outcome = cdmx.extract(_page(row))

        assert outcome.errors == {}
        assert outcome.posters[0].missing_date is None
