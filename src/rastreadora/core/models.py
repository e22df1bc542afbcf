# ABOUTME: Missing person poster record and the code enums used by its fields
# ABOUTME: Records are immutable; empty fields are dropped when serialized

from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, HttpUrl


class State(str, Enum):
    """Mexican states, as ISO 3166-2:MX codes."""

    CIUDAD_DE_MEXICO = "MX-CMX"
    AGUASCALIENTES = "MX-AGU"
    BAJA_CALIFORNIA = "MX-BCN"
    BAJA_CALIFORNIA_SUR = "MX-BCS"
    CAMPECHE = "MX-CAM"
    COAHUILA_DE_ZARAGOZA = "MX-COA"
    COLIMA = "MX-COL"
    CHIAPAS = "MX-CHP"
    CHIHUAHUA = "MX-CHH"
    DURANGO = "MX-DUR"
    GUANAJUATO = "MX-GUA"
    GUERRERO = "MX-GRO"
    HIDALGO = "MX-HID"
    JALISCO = "MX-JAL"
    MEXICO = "MX-MEX"
    MICHOACAN_DE_OCAMPO = "MX-MIC"
    MORELOS = "MX-MOR"
    NAYARIT = "MX-NAY"
    NUEVO_LEON = "MX-NLE"
    OAXACA = "MX-OAX"
    PUEBLA = "MX-PUE"
    QUERETARO = "MX-QUE"
    QUINTANA_ROO = "MX-ROO"
    SAN_LUIS_POTOSI = "MX-SLP"
    SINALOA = "MX-SIN"
    SONORA = "MX-SON"
    TABASCO = "MX-TAB"
    TAMAULIPAS = "MX-TAM"
    TLAXCALA = "MX-TLA"
    VERACRUZ_DE_IGNACIO_DE_LA_LLAVE = "MX-VER"
    YUCATAN = "MX-YUC"
    ZACATECAS = "MX-ZAC"


class PhysicalBuild(str, Enum):
    SLIM = "S"
    REGULAR = "R"
    HEAVY = "H"


class Complexion(str, Enum):
    VERY_LIGHT = "VL"
    LIGHT = "L"
    LIGHT_INTERMEDIATE = "LI"
    DARK_INTERMEDIATE = "DI"
    DARK = "D"
    VERY_DARK = "VD"


class Sex(str, Enum):
    FEMALE = "F"
    MALE = "M"


class AlertType(str, Enum):
    """Alert programme a poster was published under."""

    ALBA = "AL"
    AMBER = "AM"
    HAS_VISTO_A = "HV"
    ODISEA = "OD"


class MissingPersonPoster(BaseModel):
    """One missing person poster as published by a state prosecutor's office.

    Only ``po_state`` is required. Every other field may be absent and keeps its
    empty value (``""``, ``0``, ``False`` or ``None``), which is left out of the
    serialized output.
    """

    model_config = ConfigDict(frozen=True)

    # Missing person
    mp_name: str = Field(default="", description="Full name, title-cased")
    mp_height: int = Field(default=0, ge=0, description="Height in centimetres")
    mp_weight: int = Field(default=0, ge=0, description="Weight in kilograms")
    mp_physical_build: PhysicalBuild | None = None
    mp_complexion: Complexion | None = None
    mp_sex: Sex | None = None
    mp_dob: date | None = Field(default=None, description="Date of birth")
    mp_age_when_disappeared: int = Field(default=0, ge=0)
    mp_eyes_description: str = ""
    mp_hair_description: str = ""
    mp_outfit_description: str = ""
    mp_identifying_characteristics: str = ""

    # Disappearance
    circumstances_behind_dissapearance: str = ""
    missing_from: str = ""
    missing_date: date | None = None
    found: bool = False
    alert_type: AlertType | None = None

    # Poster
    po_state: State = Field(description="Jurisdiction that published the poster")
    po_post_url: HttpUrl | None = Field(default=None, description="Page the poster was published on")
    po_post_publication_date: date | None = None
    po_poster_url: HttpUrl | None = Field(default=None, description="Poster image")
    is_multiple: bool = Field(default=False, description="The poster covers more than one person")

    def to_json_dict(self) -> dict:
        """JSON-ready dict without the fields that hold their empty value."""
        return self.model_dump(mode="json", exclude_defaults=True)
