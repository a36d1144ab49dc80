from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from patentterm import __version__
from patentterm.settings import API_DEBUG, configure_logging, settings
from .term import router as term_router

app = FastAPI(
    title="Patent Term Calculator API",
    version=__version__,
    description="HTTP layer over patentterm.engine.compute_term.",
    debug=API_DEBUG,
)

# --- Logging -------------------------------------------------------
configure_logging()

# --- CORS ----------------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Accept"],
)

# --- Include Routers ----------------------------------------------------------
app.include_router(term_router)

# ---------- health-check ----------
@app.get("/")
def root():
    return {"status": "ok", "msg": "Patent term API is alive"}


if __name__ == "__main__":
    import uvicorn

    from patentterm.settings import API_HOST, API_PORT

    uvicorn.run("api.main:app", host=API_HOST, port=API_PORT, reload=API_DEBUG)
