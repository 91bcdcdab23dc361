"""
Data schemas for the FluentAI lesson service.
"""
from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class LessonPromptRequest(BaseModel):
    prompt: str


class RunHandle(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    thread_id: str = Field(alias="threadId")
    run_id: str = Field(alias="runId")


class PollResult(BaseModel):
    status: str
    completed: bool
    data: Optional[Any] = None


class ErrorResponse(BaseModel):
    error: str


class ProficiencyLevel(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class ExerciseType(str, Enum):
    MULTIPLE_CHOICE = "multiple-choice"
    FILL_IN_THE_BLANK = "fill-in-the-blank"
    TRANSLATION = "translation"


class Exercise(BaseModel):
    question: str
    type: ExerciseType
    options: Optional[List[str]] = None
    correct_answer: str
    explanation: str


class VocabularyItem(BaseModel):
    word: str
    translation: str
    example_sentence: str
    exercises: List[Exercise] = []


class Grammar(BaseModel):
    topic: str
    explanation: str
    exercises: List[Exercise] = []


class Lesson(BaseModel):
    title: str
    level: str
    language: str
    topic: str
    overview: str
    vocabulary: List[VocabularyItem] = []
    grammar: Grammar


class LessonEnvelope(BaseModel):
    """Top-level object the assistant is instructed to return."""
    lesson: Lesson
