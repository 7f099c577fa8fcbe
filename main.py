from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pymongo.database import Database
from config import Settings
from database.connection import build_client, get_database, ensure_indexes
from errors import register_exception_handlers
import logging

# =====================================================
# * Importación de Routers
# =====================================================
from auth.routes import router as auth_router
from routes.task_routes import router as task_router

logger = logging.getLogger("main")


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s"
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    ensure_indexes(app.state.db)
    yield
    client = getattr(app.state, "mongo_client", None)
    if client is not None:
        client.close()
        logger.info("🔌 Conexión MongoDB cerrada.")


# =====================================================
# * Inicialización de la aplicación
# =====================================================
def create_app(settings: Optional[Settings] = None, db: Optional[Database] = None) -> FastAPI:
    """
    Arma la aplicación. Si no se entrega `db` se crea el cliente Mongo a partir
    de la configuración; los handlers lo reciben vía app.state (ver database.connection.get_db).
    """
    settings = (settings or Settings()).validate()
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=f"{settings.PROJECT_NAME} Backend",
        version=settings.VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )

    # =====================================================
    # * Configuración CORS
    # =====================================================
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # =====================================================
    # * Base de datos (handle explícito, sin globales)
    # =====================================================
    app.state.settings = settings
    app.state.mongo_client = None
    if db is None:
        app.state.mongo_client = build_client(settings)
        db = get_database(app.state.mongo_client, settings)
    app.state.db = db

    register_exception_handlers(app)

    # =====================================================
    # * Registro de Rutas
    # =====================================================
    app.include_router(auth_router, prefix="/auth", tags=["Auth"])
    app.include_router(task_router, prefix="/tasks", tags=["Tasks"])

    @app.get("/", summary="Ruta raíz del backend")
    def root():
        return {
            "message": f"🚀 {settings.PROJECT_NAME} Backend activo",
            "version": settings.VERSION,
            "env": settings.ENV
        }

    logger.info(f"🌍 {settings.PROJECT_NAME} backend iniciado en modo '{settings.ENV}'.")
    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(create_app(), host="0.0.0.0", port=8000)
