from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import CORS_ORIGINS, configure_logging
from routers import programs

configure_logging()

app = FastAPI(
    title="Travel Program Catalog",
    description="Program catalog with hotel-combination pricing and booking inquiries",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"]
)

app.include_router(programs.router)


@app.get("/")
def root():
    return {
        "status":  "ok",
        "message": "Travel Program Catalog API is running",
        "docs":    "/docs"
    }
