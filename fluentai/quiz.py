"""
Practice state for a rendered lesson.

Two independent cursors walk the lesson: one over the vocabulary items and
their exercises, one over the grammar exercises. Each exercise goes
unanswered -> answered(is_correct) -> advance. The state travels with the
page in hidden form fields, the server keeps nothing.
"""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from fluentai.schemas import Exercise, ExerciseType, Lesson, VocabularyItem


class Section(str, Enum):
    VOCABULARY = "vocabulary"
    GRAMMAR = "grammar"


def check_answer(exercise: Exercise, answer: str) -> bool:
    if exercise.type is ExerciseType.MULTIPLE_CHOICE:
        return answer == exercise.correct_answer
    return answer.strip().lower() == exercise.correct_answer.strip().lower()


class QuizProgress(BaseModel):
    section: Section = Section.VOCABULARY
    vocab_index: int = Field(0, ge=0)
    vocab_exercise_index: int = Field(0, ge=0)
    grammar_exercise_index: int = Field(0, ge=0)
    answered: bool = False
    answer: Optional[str] = None
    is_correct: Optional[bool] = None

    def current_item(self, lesson: Lesson) -> Optional[VocabularyItem]:
        if self.vocab_index < len(lesson.vocabulary):
            return lesson.vocabulary[self.vocab_index]
        return None

    def current_exercise(self, lesson: Lesson) -> Optional[Exercise]:
        if self.section is Section.GRAMMAR:
            exercises = lesson.grammar.exercises
            index = self.grammar_exercise_index
        else:
            item = self.current_item(lesson)
            exercises = item.exercises if item else []
            index = self.vocab_exercise_index
        return exercises[index] if index < len(exercises) else None

    def finished(self, lesson: Lesson) -> bool:
        """True when the active cursor sits on the last exercise of its section."""
        if self.section is Section.GRAMMAR:
            return self.grammar_exercise_index >= len(lesson.grammar.exercises) - 1
        if self.vocab_index < len(lesson.vocabulary) - 1:
            return False
        item = self.current_item(lesson)
        return item is None or self.vocab_exercise_index >= len(item.exercises) - 1

    def submit(self, lesson: Lesson, answer: str) -> "QuizProgress":
        exercise = self.current_exercise(lesson)
        if exercise is None or self.answered:
            return self
        return self.model_copy(update={
            "answered": True,
            "answer": answer,
            "is_correct": check_answer(exercise, answer),
        })

    def advance(self, lesson: Lesson) -> "QuizProgress":
        if self.current_exercise(lesson) is not None and not self.answered:
            return self
        # the last exercise stays answered so its feedback remains visible
        if self.finished(lesson):
            return self
        update = {"answered": False, "answer": None, "is_correct": None}
        if self.section is Section.GRAMMAR:
            update["grammar_exercise_index"] = self.grammar_exercise_index + 1
        else:
            item = self.current_item(lesson)
            if item is not None and self.vocab_exercise_index < len(item.exercises) - 1:
                update["vocab_exercise_index"] = self.vocab_exercise_index + 1
            else:
                update["vocab_index"] = self.vocab_index + 1
                update["vocab_exercise_index"] = 0
        return self.model_copy(update=update)

    def switch_section(self, section: Section) -> "QuizProgress":
        return self.model_copy(update={
            "section": Section(section),
            "answered": False,
            "answer": None,
            "is_correct": None,
        })
