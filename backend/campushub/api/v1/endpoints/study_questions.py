from fastapi import APIRouter, Depends, Request

from campushub.core.rate_limiter import ai_operation_rate_limit
from campushub.core.session import Session
from campushub.modules.auth.dependencies import get_question_generator, require_study_questions
from campushub.schemas.study_questions import StudyQuestionsRequest, StudyQuestionsResult
from campushub.services.study_questions import StudyQuestionGenerator

router = APIRouter(prefix="/study-questions", tags=["Study Questions"])


@router.post("/generate", response_model=StudyQuestionsResult)
@ai_operation_rate_limit()
async def generate_study_questions(
    request: Request,
    payload: StudyQuestionsRequest,
    session: Session = Depends(require_study_questions),
    generator: StudyQuestionGenerator = Depends(get_question_generator),
):
    """Generate study questions from pasted document text (rate limited)"""
    return await generator.generate(payload.document_content, session=session)
