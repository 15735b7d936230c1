import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, StrictInt

from wordbrain.settings import settings

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
logger = logging.getLogger("wordbrain")

# Populated at startup
_dictionary = None


class SolveRequest(BaseModel):
    rows: list[str] = Field(..., min_length=1)
    lengths: list[StrictInt] = Field(..., min_length=1)


def _apply_log_level():
    logger.setLevel(logging.DEBUG if settings.DEBUG else logging.INFO)


def create_app() -> FastAPI:
    from contextlib import asynccontextmanager

    @asynccontextmanager
    async def lifespan(application: FastAPI):
        global _dictionary

        _apply_log_level()
        from wordbrain.dictionary import load_dictionary
        logger.info("Loading dictionary from %s", settings.DICTIONARY_PATH)
        _dictionary = load_dictionary(settings.DICTIONARY_PATH)
        logger.info("Dictionary loaded")

        yield

    application = FastAPI(title="WordBrain Solver", lifespan=lifespan)

    @application.get("/health")
    async def health():
        return {"status": "ok", "dictionary_loaded": _dictionary is not None}

    @application.post("/solve")
    async def solve(body: SolveRequest):
        from starlette.concurrency import run_in_threadpool
        from wordbrain.errors import PuzzleError
        from wordbrain.metrics import StageTimer
        from wordbrain.puzzle import Puzzle
        from wordbrain.solver import Solver

        if _dictionary is None:
            raise HTTPException(503, "Dictionary not loaded")

        timer = StageTimer()

        with timer.stage("parse"):
            try:
                puzzle = Puzzle.parse(body.rows, body.lengths)
            except PuzzleError as e:
                raise HTTPException(400, str(e))

        logger.info("Board %dx%d: %s lengths=%s", puzzle.grid.size, puzzle.grid.size,
                    " / ".join(puzzle.grid.rows()), list(puzzle.lengths))

        solver = Solver(_dictionary, puzzle.grid, puzzle.lengths)
        with timer.stage("solve"):
            solutions = await run_in_threadpool(solver.solve, settings.WORKERS)

        returned = solutions[:settings.MAX_RESULTS] if settings.MAX_RESULTS > 0 else solutions
        logger.info("Found %d solutions (returning %d)", len(solutions), len(returned))

        return JSONResponse({
            "grid": puzzle.grid.rows(),
            "solutions": [[str(word) for word in solution] for solution in returned],
            "solution_count": len(solutions),
            "all_words": [str(word) for word in solver.all_words()],
            "processing_time": timer.total_ms,
            "stage_timings": timer.summary(),
        })

    @application.get("/api/settings")
    async def api_get_settings():
        from wordbrain.settings import get_editable_settings, EDITABLE_FIELDS
        values = get_editable_settings(settings)
        field_types = {k: v.__name__ for k, v in EDITABLE_FIELDS.items()}
        return JSONResponse({"settings": values, "field_types": field_types})

    @application.post("/api/settings")
    async def api_post_settings(request: Request):
        from wordbrain.settings import update_settings, get_editable_settings
        body = await request.json()
        errors = update_settings(settings, **body)
        _apply_log_level()
        if errors:
            return JSONResponse({"updated": get_editable_settings(settings), "errors": errors}, status_code=400)
        logger.info("Settings updated: %s", body)
        return JSONResponse({"updated": get_editable_settings(settings)})

    return application


app = create_app()


def run():
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT)


if __name__ == "__main__":
    run()
