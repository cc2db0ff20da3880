from fastapi import FastAPI
from contextlib import asynccontextmanager
from portal.core.database import connect_to_mongo, close_mongo_connection
from portal.core.logger import setup_logging
from portal.modules.auth.router import auth_router
from portal.modules.academics.router import academics_router
from portal.modules.teachers.router import teacher_router
from portal.modules.allocations.router import allocation_router
from portal.modules.calendar.router import calendar_router
from portal.modules.sessions.router import session_router
from portal.modules.dashboard.router import dashboard_router
from portal.modules.students.router import student_router
from portal.modules.resources.router import resource_router
from portal.modules.operating_schedule.router import operating_schedule_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    setup_logging()
    await connect_to_mongo()
    yield
    # Shutdown
    await close_mongo_connection()


app = FastAPI(title="School Portal", lifespan=lifespan)


@app.get("/")
async def root():
    return {"message": "School Portal API"}


app.include_router(auth_router, prefix="/api")
app.include_router(academics_router, prefix="/api")
app.include_router(teacher_router, prefix="/api")
app.include_router(allocation_router, prefix="/api")
app.include_router(calendar_router, prefix="/api")
app.include_router(session_router, prefix="/api")
app.include_router(dashboard_router, prefix="/api")
app.include_router(student_router, prefix="/api")
app.include_router(resource_router, prefix="/api")
app.include_router(operating_schedule_router, prefix="/api")
