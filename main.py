import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ranges import RangeTable, get_ranges

# Routers
from routers.admin import router as admin_router
from routers.exercises import router as exercises_router
from routers.health import router as health_router
from routers.problems import router as problems_router
from routers.sessions import router as sessions_router

logger = logging.getLogger("linear-tutor")
logging.basicConfig(level=logging.INFO)

# Fail at startup on a malformed range table rather than on the first request
get_ranges()
logger.info("Range table ready (source: %s)", RangeTable.source())

app = FastAPI(title="Linear Tutor – Equation Practice API")

# Allow calls from the widget's dev server and production site
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*", "x-admin-token"],
)


@app.get("/")
def health_root():
    return {"ok": True}


app.include_router(problems_router)  # /generate, /check, /explain
app.include_router(sessions_router)  # /sessions/...
app.include_router(exercises_router)  # /exercises/...
app.include_router(admin_router)  # /admin/...
app.include_router(health_router)  # /health/...
