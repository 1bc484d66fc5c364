from controllers import auth_controller, course_controller, enrollment_controller, health_controller, user_controller
from contextlib import asynccontextmanager
from config.logging import setup_logging
from config.database import Database
from fastapi import FastAPI

# Set custom logger for application
logger = setup_logging()


def create_app(database_url: str = None) -> FastAPI:
    database = Database(database_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.database = database.open()
        logger.info("EduTech API started")
        try:
            yield
        finally:
            database.close()
            logger.info("EduTech API shut down")

    app = FastAPI(title = "EduTech API", lifespan = lifespan)

    # Include routers
    app.include_router(health_controller.router)
    app.include_router(auth_controller.router)
    app.include_router(user_controller.router)
    app.include_router(course_controller.router)
    app.include_router(enrollment_controller.router)
    return app


app = create_app()
