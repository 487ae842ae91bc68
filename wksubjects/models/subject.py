"""Subject record schema.

Field names match the API's JSON keys verbatim so records decode and
``model_dump()`` by name. Absent keys and ``null`` both decode to the field's
zero value; a key present with the wrong scalar type is a validation error.
"""

from enum import Enum
from typing import Any, List, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    StrictStr,
    field_validator,
    model_validator,
)


class SubjectType(Enum):
    """Subject kinds served by the API."""
    RADICAL = "radical"
    KANJI = "kanji"
    VOCABULARY = "vocabulary"
    KANA_VOCABULARY = "kana_vocabulary"


class WireModel(BaseModel):
    """Immutable record decoded from API JSON."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, values: Any) -> Any:
        # null means "not set": let the field default apply
        if values is None:
            return {}
        if isinstance(values, dict):
            return {k: v for k, v in values.items() if v is not None}
        return values


class CharacterImageMetadata(WireModel):
    color: StrictStr = ""
    dimensions: StrictStr = ""
    style_name: StrictStr = ""
    inline_styles: StrictBool = False


class CharacterImage(WireModel):
    """One rendering of a radical that has no unicode character."""
    content_type: StrictStr = ""
    url: StrictStr = ""
    metadata: CharacterImageMetadata = Field(default_factory=CharacterImageMetadata)


class Meaning(WireModel):
    meaning: StrictStr = ""
    primary: StrictBool = False
    accepted_answer: StrictBool = False


class AuxiliaryMeaning(WireModel):
    """Extra meaning the quiz either accepts (whitelist) or rejects (blacklist)."""
    meaning: StrictStr = ""
    type: StrictStr = ""


class Reading(WireModel):
    type: StrictStr = ""
    primary: StrictBool = False
    reading: StrictStr = ""
    accepted_answer: StrictBool = False


class ContextSentence(WireModel):
    en: StrictStr = ""
    ja: StrictStr = ""


class PronunciationAudioMetadata(WireModel):
    gender: StrictStr = ""
    source_id: StrictInt = 0
    pronunciation: StrictStr = ""
    voice_actor_id: StrictInt = 0
    voice_actor_name: StrictStr = ""
    voice_description: StrictStr = ""


class PronunciationAudio(WireModel):
    url: StrictStr = ""
    content_type: StrictStr = ""
    metadata: PronunciationAudioMetadata = Field(
        default_factory=PronunciationAudioMetadata
    )


class SubjectData(WireModel):
    """Payload of a subject. Which fields are filled depends on the subject kind."""

    spaced_repetition_system_id: StrictInt = 0
    level: StrictInt = 0
    slug: StrictStr = ""
    hidden_at: StrictStr = ""
    document_url: StrictStr = ""

    character: StrictStr = ""
    characters: StrictStr = ""
    character_images: List[CharacterImage] = Field(default_factory=list)

    meanings: List[Meaning] = Field(default_factory=list)
    auxiliary_meanings: List[AuxiliaryMeaning] = Field(default_factory=list)
    readings: List[Reading] = Field(default_factory=list)

    # IDs of other subjects; they may live on pages not fetched yet
    component_subject_ids: List[StrictInt] = Field(default_factory=list)
    amalgamation_subject_ids: List[StrictInt] = Field(default_factory=list)

    parts_of_speech: List[StrictStr] = Field(default_factory=list)
    meaning_mnemonic: StrictStr = ""
    meaning_hint: StrictStr = ""
    reading_mnemonic: StrictStr = ""
    reading_hint: StrictStr = ""
    context_sentences: List[ContextSentence] = Field(default_factory=list)
    pronunciation_audios: List[PronunciationAudio] = Field(default_factory=list)

    @field_validator("component_subject_ids", "amalgamation_subject_ids", mode="before")
    @classmethod
    def null_ids_to_zero(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [0 if v is None else v for v in value]
        return value

    @field_validator("parts_of_speech", mode="before")
    @classmethod
    def null_strings_to_empty(cls, value: Any) -> Any:
        if isinstance(value, list):
            return ["" if v is None else v for v in value]
        return value


class Subject(WireModel):
    """
    One radical, kanji or vocabulary record.

    Identified by ``id`` within its ``object`` kind. Read-only: the record is
    a view of server state and is never mutated after decoding.
    """

    id: StrictInt = 0
    object: StrictStr = ""
    data: SubjectData = Field(default_factory=SubjectData)

    @property
    def subject_type(self) -> Optional[SubjectType]:
        """Kind of this subject, or None for a tag this client does not know."""
        try:
            return SubjectType(self.object)
        except ValueError:
            return None

    @property
    def primary_meaning(self) -> str:
        for meaning in self.data.meanings:
            if meaning.primary:
                return meaning.meaning
        return ""

    @property
    def primary_reading(self) -> str:
        for reading in self.data.readings:
            if reading.primary:
                return reading.reading
        return ""

    @property
    def accepted_meanings(self) -> List[str]:
        return [m.meaning for m in self.data.meanings if m.accepted_answer]

    @property
    def is_hidden(self) -> bool:
        return bool(self.data.hidden_at)

    def __repr__(self) -> str:
        return "<{0.__class__.__name__} id={0.id!r} object={0.object!r} slug={1!r}>".format(
            self, self.data.slug
        )
