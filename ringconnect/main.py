from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from ringconnect.core.config import settings
from ringconnect.db.init_db import create_all_tables
from ringconnect.middleware.request_logging import RequestLoggingMiddleware
from ringconnect.middleware.auth_logging import AuthLoggingMiddleware
from ringconnect.modules.auth.api.router import router as auth_router
from ringconnect.modules.profiles.api.router import router as user_router
from ringconnect.modules.posts.api.router import router as posts_router
from ringconnect.modules.posts.comments.api.router import router as comments_router
from ringconnect.modules.posts.reactions.api.router import router as reactions_router
from ringconnect.modules.home_feed.api.router import router as home_feed_router
from ringconnect.modules.follows.api.router import router as follows_router
from ringconnect.modules.notifications.api.router import router as notifications_router
from ringconnect.modules.messages.api.router import router as messages_router
from ringconnect.modules.gyms.api.router import router as gyms_router
from ringconnect.modules.training_logs.api.router import router as training_logs_router
from ringconnect.modules.mentorship.api.router import router as mentorship_router
from ringconnect.modules.championships.api.router import router as championships_router
from ringconnect.modules.videos.api.router import router as videos_router
from ringconnect.modules.sparring.api.router import router as sparring_router
from ringconnect.modules.link_preview.router import router as link_preview_router
from ringconnect.modules.realtime.router import router as realtime_router
from ringconnect.modules.media.router import router as media_router

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("app")

app = FastAPI(
    title=settings.PROJECT_NAME,
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
    debug=settings.DEBUG,
    description="Social network for combat sports athletes, coaches and gyms",
    version=settings.VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    swagger_ui_parameters={"defaultModelsExpandDepth": -1},
)

@app.on_event("startup")
async def startup_event():
    logger.info(f"Starting server in {settings.ENVIRONMENT} mode")
    logger.info(f"BASE_URL: {settings.BASE_URL}")

    create_all_tables()

# Add middleware
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(AuthLoggingMiddleware)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register API routers
api = settings.API_V1_STR
app.include_router(auth_router, prefix=f"{api}/auth", tags=["authentication"])
app.include_router(user_router, prefix=f"{api}/users", tags=["users"])
app.include_router(posts_router, prefix=f"{api}/posts", tags=["posts"])
app.include_router(comments_router, prefix=f"{api}/posts/{{post_id}}/comments", tags=["comments"])
app.include_router(reactions_router, prefix=f"{api}/posts/{{post_id}}/reactions", tags=["reactions"])
app.include_router(home_feed_router, prefix=f"{api}/feed", tags=["home feed"])
app.include_router(follows_router, prefix=f"{api}/follows", tags=["follows"])
app.include_router(notifications_router, prefix=f"{api}/notifications", tags=["notifications"])
app.include_router(messages_router, prefix=f"{api}/messages", tags=["messages"])
app.include_router(gyms_router, prefix=f"{api}/gyms", tags=["gyms"])
app.include_router(training_logs_router, prefix=f"{api}/training-logs", tags=["training logs"])
app.include_router(mentorship_router, prefix=f"{api}/mentorship", tags=["mentorship"])
app.include_router(championships_router, prefix=f"{api}/championships", tags=["championships"])
app.include_router(videos_router, prefix=f"{api}/videos", tags=["videos"])
app.include_router(sparring_router, prefix=f"{api}/sparring-requests", tags=["sparring"])
app.include_router(link_preview_router, prefix=f"{api}/link-preview", tags=["link preview"])
app.include_router(realtime_router, prefix=f"{api}/realtime", tags=["realtime"])
app.include_router(media_router)

@app.get("/")
async def root():
    return {
        "message": "Welcome to RingConnect",
        "version": settings.VERSION,
        "environment": settings.ENVIRONMENT,
        "documentation": "/docs" if settings.DEBUG else None,
    }

@app.get("/health")
def health_check():
    return {"status": "ok"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("ringconnect.main:app", host="0.0.0.0", port=8000, reload=True)
