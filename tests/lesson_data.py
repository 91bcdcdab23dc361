"""
Lesson payloads shared by the tests.
"""
import copy
import json

SPANISH_TRAVEL_LESSON = {
    "lesson": {
        "title": "Viajando por España",
        "level": "beginner",
        "language": "Spanish",
        "topic": "travel",
        "overview": "Words and phrases for getting around on your first trip.",
        "vocabulary": [
            {
                "word": "el billete",
                "translation": "the ticket",
                "example_sentence": "Necesito un billete para Madrid.",
                "exercises": [
                    {
                        "question": "What does 'el billete' mean?",
                        "type": "multiple-choice",
                        "options": ["the ticket", "the train", "the bill"],
                        "correct_answer": "the ticket",
                        "explanation": "'El billete' is a travel ticket.",
                    },
                    {
                        "question": "Translate: the ticket",
                        "type": "translation",
                        "correct_answer": "el billete",
                        "explanation": "Billete is masculine, so it takes 'el'.",
                    },
                ],
            },
            {
                "word": "la estación",
                "translation": "the station",
                "example_sentence": "La estación está cerca.",
                "exercises": [
                    {
                        "question": "¿Dónde está la ____? (station)",
                        "type": "fill-in-the-blank",
                        "correct_answer": "estación",
                        "explanation": "'Estación' means station.",
                    },
                ],
            },
        ],
        "grammar": {
            "topic": "Ser vs. estar",
            "explanation": "Use 'ser' for identity and 'estar' for location.",
            "exercises": [
                {
                    "question": "Yo ____ turista.",
                    "type": "multiple-choice",
                    "options": ["soy", "estoy", "es"],
                    "correct_answer": "soy",
                    "explanation": "Being a tourist is identity, so 'ser'.",
                },
                {
                    "question": "Translate: The hotel is near.",
                    "type": "translation",
                    "correct_answer": "El hotel está cerca",
                    "explanation": "Location uses 'estar'.",
                },
            ],
        },
    }
}


def lesson_payload():
    return copy.deepcopy(SPANISH_TRAVEL_LESSON)


def assistant_messages(text):
    """Message list as the messages endpoint returns it, newest first."""
    return {
        "object": "list",
        "data": [
            {
                "id": "msg_2",
                "role": "assistant",
                "content": [{"type": "text", "text": {"value": text, "annotations": []}}],
            },
            {
                "id": "msg_1",
                "role": "user",
                "content": [{"type": "text", "text": {"value": "prompt", "annotations": []}}],
            },
        ],
    }


def lesson_messages():
    return assistant_messages(json.dumps(SPANISH_TRAVEL_LESSON))
