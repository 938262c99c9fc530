from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

_MODEL_CONFIG = ConfigDict(
    validate_by_name=True,
    validate_by_alias=True,
    use_enum_values=True,
    extra="allow",
)


class Category(str, Enum):
    DISORDERS = "disorders"
    DRUGS = "drugs"
    GENES = "genes"


class Ontologies(str, Enum):
    CONCEPTS = "concepts"
    MESH = "mesh"


class Relationship(str, Enum):
    CHILDREN = "children"
    PARENTS = "parents"
    SIBLINGS = "siblings"
    ALLOWED_QUALIFIER = "allowedQualifier"
    QUALIFIED_BY = "qualifiedBy"
    BROADER = "broader"
    ALIKE = "alike"
    NARROWER = "narrower"
    OTHER = "other"
    RELATED_UNSPECIFIED = "relatedUnspecified"
    RELATED = "related"
    SYNONYM = "synonym"
    NOT_RELATED = "notRelated"
    CHD = "chd"
    PAR = "par"
    SIB = "sib"
    AQ = "aq"
    QB = "qb"
    RB = "rb"
    RL = "rl"
    RN = "rn"
    RO = "ro"
    RU = "ru"
    RQ = "rq"
    SY = "sy"
    XR = "xr"


class PossibleValues(BaseModel):
    model_config = _MODEL_CONFIG

    display_value: Optional[str] = None
    value: Optional[str] = None


class AttributeEntry(BaseModel):
    """Definition of a custom attribute added with ``add_artifact``."""

    model_config = _MODEL_CONFIG

    attr_name: Optional[str] = None
    data_type: Optional[str] = None
    default_value: Optional[str] = None
    description: Optional[str] = None
    display_name: Optional[str] = None
    doc_id: Optional[str] = None
    field_values: Optional[List[str]] = None
    maximum_value: Optional[str] = None
    minimum_value: Optional[str] = None
    multi_value: Optional[bool] = None
    units: Optional[str] = None
    value_type: Optional[str] = None
    possible_values: Optional[List[PossibleValues]] = None


class DictionaryEntry(BaseModel):
    """Definition of a custom concept added with ``add_artifact``."""

    model_config = _MODEL_CONFIG

    children: Optional[List[str]] = None
    cui: Optional[str] = None
    definition: Optional[List[str]] = None
    parents: Optional[List[str]] = None
    preferred_name: Optional[str] = None
    semtypes: Optional[List[str]] = None
    siblings: Optional[List[str]] = None
    surface_forms: Optional[List[str]] = None
    variants: Optional[List[str]] = None
    vocab: Optional[str] = None
    related: Optional[List[str]] = None
    source: Optional[str] = None
    source_version: Optional[str] = None


class CorpusModel(BaseModel):
    model_config = _MODEL_CONFIG

    document_count: Optional[int] = None
    corpus_name: Optional[str] = None
    ontologies: Optional[List[str]] = None
    descriptive_name: Optional[str] = None
    bvt: Optional[bool] = None
    elasticsearch_index: Optional[str] = None
