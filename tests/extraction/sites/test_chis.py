# ABOUTME: Tests for the Chiapas "Has visto a" extractor, its detail page enrichment and field parsers
# ABOUTME: Listing and detail markup mimic fge.chiapas.gob.mx

from datetime import date

import pytest

from rastreadora.core.models import AlertType, Complexion, PhysicalBuild, Sex, State
from rastreadora.document import Document
from rastreadora.errors import FetchError
from rastreadora.extraction.fetch import PageFetcher
from rastreadora.extraction.registry import SiteName, get_site
from rastreadora.extraction.sites import chis

DETAIL_VALUES = [
    "Hombre",
    "1.65 C",
    "Morena clara",
    "Cafés",
    "Negro lacio",
    "60 Kg.",
    "10/05/2022",
    "Delgada",
    "Mediana",
    "Chica",
    "Recta",
    "Secundaria",
    "Tuxtla Gutiérrez",
]

DETAIL = (
    "<html><body>"
    '<div class="proile-rating">Registro: <span>123/2022</span></div>'
    + "".join(f'<p class="color-subtitulo-theme1"> {value} </p>' for value in DETAIL_VALUES)
    + '<div class="profile-work"><p>31/01/2000</p><p>Tatuaje en el brazo</p><p>Salió de su domicilio</p></div>'
    "</body></html>"
)


def _card(name: str = "JUAN PÉREZ", href: str = "/Servicios/Hasvistoa/HasVistoA/1") -> str:
    return (
        '<div class="column_hasvistoa">'
        '<div class="contenido-img"><img src="/Imagenes/Hasvistoa/1.jpg"></div>'
        f'<a class="nombre" href="{href}">{name}</a>'
        "<span>Ausente</span>"
        "</div>"
    )


def _listing(*cards: str) -> str:
    return f"<html><body>{''.join(cards)}</body></html>"


def _page(*cards: str) -> Document:
    return Document.parse(_listing(*cards))


class TestParsers:
    """Test the detail page field parsers"""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("Delgada", PhysicalBuild.SLIM), ("ROBUSTA", PhysicalBuild.HEAVY), ("Mediana", PhysicalBuild.REGULAR)],
    )
    def test_build(self, value, expected):
        assert chis.parse_chis_build(value) is expected

    @pytest.mark.parametrize("value", ["No especificado", "Sin dato", ""])
    def test_unknown_build(self, value):
        assert chis.parse_chis_build(value) is None

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("Apiñonado", Complexion.LIGHT_INTERMEDIATE),
            ("Morena clara", Complexion.DARK_INTERMEDIATE),
            ("morena obscura", Complexion.VERY_DARK),
            ("Albino", Complexion.VERY_LIGHT),
        ],
    )
    def test_complexion(self, value, expected):
        assert chis.parse_chis_complexion(value) is expected

    def test_sex(self):
        assert chis.parse_chis_sex("Mujer") is Sex.FEMALE
        assert chis.parse_chis_sex("HOMBRE") is Sex.MALE
        assert chis.parse_chis_sex("No especificado") is None

    @pytest.mark.parametrize("value", ["Ausente", "No localizada", "Extraviada", ""])
    def test_found_is_always_false(self, value):
        assert chis.parse_chis_found(value) is False

    @pytest.mark.parametrize(
        ("value", "expected"), [("1.65 C", 165), ("1.7", 170), ("0.98 C", 98), ("C", None), ("-1.5", None)]
    )
    def test_height(self, value, expected):
        assert chis.parse_chis_height(value) == expected

    @pytest.mark.parametrize(
        ("value", "expected"), [("60 Kg.", 60), ("72 KG", 72), ("Sin dato", None), ("6²", None), ("-60 Kg.", None)]
    )
    def test_weight(self, value, expected):
        assert chis.parse_chis_weight(value) == expected

    def test_date(self):
        assert chis.parse_chis_date("31/01/2000") == date(2000, 1, 31)
        assert chis.parse_chis_date("2000-01-31") is None


@pytest.mark.parametrize(("page", "suffix"), [(0, "0"), (1, "0"), (2, "1"), (10, "9")])
def test_build_url(page, suffix):
    assert chis.build_url(page) == f"https://www.fge.chiapas.gob.mx/Servicios/Hasvistoa/Page/{suffix}"


class TestExtract:
    """Test the listing page"""

    def test_card_fields(self):
        outcome = chis.extract(_page(_card()))

        poster = outcome.posters[0]
        assert poster.mp_name == "Juan Pérez"
        assert poster.alert_type is AlertType.HAS_VISTO_A
        assert poster.po_state is State.CHIAPAS
        assert poster.found is False
        assert str(poster.po_post_url) == "https://www.fge.chiapas.gob.mx/Servicios/Hasvistoa/HasVistoA/1"
        assert str(poster.po_poster_url) == "https://www.fge.chiapas.gob.mx/Imagenes/Hasvistoa/1.jpg"

    def test_errors_by_position(self):
        outcome = chis.extract(_page(_card(), _card(href=""), _card(name="  ")))
        assert len(outcome.posters) == 1
        assert outcome.errors == {2: "po_post_url can't be empty", 3: "mp_name can't be empty"}


class TestDetail:
    """Test the detail page enrichment"""

    def test_parse_detail(self):
        updates = chis.parse_detail(Document.parse(DETAIL))

        assert updates["mp_sex"] is Sex.MALE
        assert updates["mp_height"] == 165
        assert updates["mp_weight"] == 60
        assert updates["mp_complexion"] is Complexion.DARK_INTERMEDIATE
        assert updates["mp_physical_build"] is PhysicalBuild.SLIM
        assert updates["mp_eyes_description"] == "Cafés"
        assert updates["mp_hair_description"] == "Negro lacio"
        assert updates["missing_date"] == date(2022, 5, 10)
        assert updates["mp_dob"] == date(2000, 1, 31)
        assert updates["circumstances_behind_dissapearance"] == "Salió de su domicilio"
        assert updates["mp_identifying_characteristics"] == (
            "Registro: 123/2022, Boca: Mediana, Tamaño de nariz: Chica, Tipo de nariz: Recta, "
            "Escolaridad: Secundaria, Originario de: Tuxtla Gutiérrez, Señas particulares: Tatuaje en el brazo"
        )

    def test_parse_incomplete_detail(self):
        updates = chis.parse_detail(Document.parse('<p class="color-subtitulo-theme1">Hombre</p>'))
        assert updates == {"mp_identifying_characteristics": "Registro: "}

    @pytest.mark.asyncio
    async def test_enrich(self):
        requested = []

        async def retrieve(url):
            requested.append(url)
            return Document.parse(DETAIL)

        poster = chis.extract(_page(_card())).posters[0]
        enriched = await chis.enrich(poster, retrieve)

        assert requested == ["https://www.fge.chiapas.gob.mx/Servicios/Hasvistoa/HasVistoA/1"]
        assert enriched.mp_name == "Juan Pérez"
        assert enriched.mp_height == 165
        assert poster.mp_height == 0

    @pytest.mark.asyncio
    async def test_enrich_propagates_fetch_errors(self):
        async def retrieve(url):
            raise FetchError(f"{url} responded with a 404 status code")

        poster = chis.extract(_page(_card())).posters[0]
        with pytest.raises(FetchError):
            await chis.enrich(poster, retrieve)

    @pytest.mark.asyncio
    async def test_listing_with_detail_pages(self, httpx_mock):
        site = get_site(SiteName.CHIS_HASVISTOA)
        listing = site.build_url(1)
        httpx_mock.add_response(
            url=listing, html=_listing(_card("ANA", "/Servicios/Hasvistoa/HasVistoA/1"), _card("EVA", "/x/2"))
        )
        httpx_mock.add_response(url="https://www.fge.chiapas.gob.mx/Servicios/Hasvistoa/HasVistoA/1", html=DETAIL)
        httpx_mock.add_response(url="https://www.fge.chiapas.gob.mx/x/2", status_code=404)

        async with PageFetcher() as fetcher:
            outcome = await fetcher.fetch_and_extract(listing, site)

        ana, eva = outcome.posters
        assert ana.mp_sex is Sex.MALE
        assert eva.mp_name == "Eva"
        assert eva.mp_sex is None
