# eventflow/main.py
from datetime import datetime
from typing import Callable, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from eventflow.config import Config, config
from eventflow.features.board.controller import PlanFormController
from eventflow.features.board.router import router as board_router
from eventflow.features.events.router import router as events_router
from eventflow.features.events.service import EventList
from eventflow.features.events.store import EventStore
from eventflow.features.plan.router import router as plan_router
from eventflow.features.plan.service import PlanPipeline
from eventflow.lib.ids import MonotonicIdGenerator
from eventflow.lib.kv_store import FileKeyValueStore, KeyValueStore
from eventflow.lib.llm import TextGenerator, build_text_generator
from eventflow.logger import get_logger

log = get_logger(__name__)

def create_app(
    cfg: Config = config,
    *,
    kv: Optional[KeyValueStore] = None,
    generator: Optional[TextGenerator] = None,
    id_factory: Optional[Callable[[], int]] = None,
    clock: Callable[[], datetime] = datetime.now,
) -> FastAPI:
    """
    Build the app and wire store -> event list -> pipeline -> form controller onto app.state.
    The stored collection is read exactly once, here.
    """
    app = FastAPI(title="EventFlow AI", debug=cfg.debug)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.allowed_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    store = EventStore(kv if kv is not None else FileKeyValueStore(cfg.store_dir), key=cfg.store_key)
    events = EventList(store)

    if id_factory is None:
        ids = MonotonicIdGenerator()
        ids.seed(events.ids())
        id_factory = ids

    if generator is None:
        generator = build_text_generator(cfg)
        log.info(f"text generation via {cfg.llm_provider}")

    pipeline = PlanPipeline(generator, id_factory=id_factory, clock=clock)

    app.state.events = events
    app.state.pipeline = pipeline
    app.state.controller = PlanFormController(pipeline, events)

    app.include_router(board_router)
    app.include_router(events_router)
    app.include_router(plan_router)

    @app.get("/healthz", tags=["health"])
    async def healthz():
        return {"status": "ok", "events": len(events)}

    return app

app = create_app()
