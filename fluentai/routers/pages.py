"""
HTML pages: the lesson request form and the practice view.
"""
import logging
import os

from fastapi import APIRouter, Depends, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from jinja2 import pass_context
from pydantic import ValidationError
from starlette.status import HTTP_302_FOUND, HTTP_400_BAD_REQUEST

from fluentai.dependencies import get_orchestrator
from fluentai.quiz import QuizProgress, Section
from fluentai.schemas import Lesson, ProficiencyLevel
from fluentai.services.lessons import build_prompt, parse_lesson
from fluentai.services.orchestrator import LessonOrchestrator, PollMode

router = APIRouter(tags=["pages"], include_in_schema=False)
logger = logging.getLogger(__name__)

TEMPLATES_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "templates")


# flash helpers
@pass_context
def get_flashed_messages(ctx):
    request: Request = ctx['request']
    return request.session.pop('_messages', [])


def flash(request: Request, message: str):
    request.session.setdefault('_messages', []).append(message)


templates = Jinja2Templates(directory=TEMPLATES_DIR)
templates.env.globals['get_flashed_messages'] = get_flashed_messages


def render_lesson(request: Request, lesson: Lesson, progress: QuizProgress):
    return templates.TemplateResponse(request, 'lesson.html', {
        'title': lesson.title,
        'lesson': lesson,
        'progress': progress,
        'item': progress.current_item(lesson),
        'exercise': progress.current_exercise(lesson),
        'finished': progress.finished(lesson),
        'sections': list(Section),
        'lesson_json': lesson.model_dump_json(),
        'progress_json': progress.model_dump_json(),
    })


@router.get('/', response_class=HTMLResponse)
async def index(request: Request):
    return templates.TemplateResponse(request, 'index.html', {
        'title': 'FluentAI',
        'levels': list(ProficiencyLevel),
        'form': request.session.pop('_form', {}),
    })


@router.post('/generate', response_class=HTMLResponse)
async def generate(
    request: Request,
    target_language: str = Form(''),
    proficiency_level: str = Form(''),
    interests: str = Form(''),
    orchestrator: LessonOrchestrator = Depends(get_orchestrator),
):
    form = {'target_language': target_language, 'proficiency_level': proficiency_level, 'interests': interests}
    if not target_language.strip() or not interests.strip() or proficiency_level not in {l.value for l in ProficiencyLevel}:
        flash(request, 'Please fill in the language, your level and your interests')
        request.session['_form'] = form
        return RedirectResponse(url=request.url_for('index'), status_code=HTTP_302_FOUND)
    prompt = build_prompt(target_language, proficiency_level, interests)
    try:
        payload = await orchestrator.execute(prompt, PollMode.BLOCKING)
        lesson = parse_lesson(payload)
    except Exception as e:
        logger.error(f"Error generating lesson for '{prompt}': {e}")
        flash(request, f'Failed to generate learning plan: {e}')
        request.session['_form'] = form
        return RedirectResponse(url=request.url_for('index'), status_code=HTTP_302_FOUND)
    return render_lesson(request, lesson, QuizProgress())


@router.post('/lesson/practice', response_class=HTMLResponse)
async def practice(
    request: Request,
    lesson_json: str = Form(...),
    progress_json: str = Form(...),
    action: str = Form(...),
    answer: str = Form(''),
    section: str = Form(Section.VOCABULARY.value),
):
    try:
        lesson = Lesson.model_validate_json(lesson_json)
        progress = QuizProgress.model_validate_json(progress_json)
    except ValidationError as e:
        logger.warning(f"Discarding practice state that failed validation: {e.error_count()} error(s)")
        flash(request, 'Your lesson could not be restored, please generate a new one')
        return RedirectResponse(url=request.url_for('index'), status_code=HTTP_302_FOUND)

    if action == 'answer':
        progress = progress.submit(lesson, answer)
    elif action == 'next':
        progress = progress.advance(lesson)
    elif action == 'switch':
        try:
            progress = progress.switch_section(Section(section))
        except ValueError:
            raise HTTPException(status_code=HTTP_400_BAD_REQUEST, detail=f"Unknown section: {section}")
    else:
        raise HTTPException(status_code=HTTP_400_BAD_REQUEST, detail=f"Unknown action: {action}")
    return render_lesson(request, lesson, progress)
