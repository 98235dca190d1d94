from fastapi import APIRouter
from campushub.api.v1.endpoints import (
    auth, dashboard, enquiries, exams, fees, gallery, health, leave, library,
    notices, salaries, students, study_questions, teachers, timetable,
)

api_router = APIRouter()

api_router.include_router(health.router)


# Simple health check endpoint for load balancers
@api_router.get("/health", tags=["Health"])
async def health_check():
    return {"status": "healthy", "service": "campus-hub-backend"}


api_router.include_router(auth.router)
api_router.include_router(dashboard.router)
api_router.include_router(students.router)
api_router.include_router(teachers.router)
api_router.include_router(fees.structures_router)
api_router.include_router(fees.records_router)
api_router.include_router(salaries.router)
api_router.include_router(library.router)
api_router.include_router(exams.router)
api_router.include_router(timetable.router)
api_router.include_router(notices.router)
api_router.include_router(gallery.router)
api_router.include_router(leave.router)
api_router.include_router(study_questions.router)
api_router.include_router(enquiries.router)
