"""Data models for wksubjects."""

from .subject import (
    AuxiliaryMeaning,
    CharacterImage,
    CharacterImageMetadata,
    ContextSentence,
    Meaning,
    PronunciationAudio,
    PronunciationAudioMetadata,
    Reading,
    Subject,
    SubjectData,
    SubjectType,
)
from .page import Page, PageSpec

__all__ = [
    'AuxiliaryMeaning',
    'CharacterImage',
    'CharacterImageMetadata',
    'ContextSentence',
    'Meaning',
    'PronunciationAudio',
    'PronunciationAudioMetadata',
    'Reading',
    'Subject',
    'SubjectData',
    'SubjectType',
    'Page',
    'PageSpec',
]
