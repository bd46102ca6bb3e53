from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.deps import get_config
from api.routes.theory import router as theory_router
from api.routes.tools import router as tools_router

_config = get_config()

app = FastAPI(title=_config.api_title)

# CORS: allow local front-ends to call the API
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(_config.cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(theory_router)
app.include_router(tools_router)


@app.get("/health")
def health() -> dict[str, str]:
    """Return a simple liveness check."""
    return {"status": "ok"}
