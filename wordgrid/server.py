import logging
import random

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from wordgrid.settings import settings

logging.basicConfig(level=settings.LOG_LEVEL, format="%(asctime)s %(name)s %(levelname)s %(message)s")
logger = logging.getLogger("wordgrid")


class SolveRequest(BaseModel):
    board: list[list[str]]


def create_app(trie=None) -> FastAPI:
    """Build the HTTP app.

    When ``trie`` is None the dictionary is loaded from
    ``settings.DICTIONARY_PATH`` at startup; tests pass a prebuilt tree.
    """
    from contextlib import asynccontextmanager

    @asynccontextmanager
    async def lifespan(application: FastAPI):
        if application.state.trie is None:
            from wordgrid.trie import load_trie
            logger.info("Loading dictionary from %s", settings.DICTIONARY_PATH)
            application.state.trie = load_trie(str(settings.DICTIONARY_PATH))
            logger.info("Trie loaded")
        yield

    application = FastAPI(title="Word Grid Solver", debug=settings.DEBUG, lifespan=lifespan)
    application.state.trie = trie

    def _solve_response(grid) -> JSONResponse:
        from wordgrid.metrics import StageTimer
        from wordgrid.solver import solve as solve_board

        timer = StageTimer()
        logger.info("Board %dx%d: %s", grid.size, grid.size, " / ".join(" ".join(row) for row in grid.rows))

        with timer.stage("solve"):
            all_words, word_positions = solve_board(grid, application.state.trie, 0)

        words = all_words[:settings.MAX_RESULTS] if settings.MAX_RESULTS > 0 else all_words
        logger.info("Found %d words (returning top %d)", len(all_words), len(words))

        result = {
            "grid_size": grid.size,
            "board": grid.to_lists(),
            "words": words,
            "word_count": len(words),
            "total_found": len(all_words),
            "positions": {w: list(word_positions[w]) for w in words},
            "processing_time": timer.total_ms,
            "stage_timings": timer.summary(),
        }
        if settings.DEBUG:
            # Uncapped results and dictionary shape for troubleshooting
            result["debug"] = {
                "all_words": all_words,
                "dictionary_words": application.state.trie.num_words(),
                "dictionary_nodes": application.state.trie.num_nodes(),
            }
        return JSONResponse(result)

    @application.get("/health")
    async def health():
        trie = application.state.trie
        return {
            "status": "ok",
            "trie_loaded": trie is not None,
            "word_count": trie.num_words() if trie is not None else 0,
        }

    @application.post("/solve")
    async def solve(body: SolveRequest):
        from wordgrid.board import Grid

        try:
            grid = Grid(body.board)
        except ValueError as e:
            raise HTTPException(400, str(e))
        return _solve_response(grid)

    @application.get("/board/random")
    async def random_solve(size: int | None = None, seed: int | None = None):
        from wordgrid.board import random_board

        size = settings.BOARD_SIZE if size is None else size
        if not 1 <= size <= settings.MAX_BOARD_SIZE:
            raise HTTPException(400, f"Board size must be between 1 and {settings.MAX_BOARD_SIZE}, got {size}")
        grid = random_board(size, random.Random(seed))
        return _solve_response(grid)

    @application.get("/api/settings")
    async def api_get_settings():
        from wordgrid.settings import get_editable_settings, EDITABLE_FIELDS
        values = get_editable_settings(settings)
        field_types = {k: v.__name__ for k, v in EDITABLE_FIELDS.items()}
        return JSONResponse({"settings": values, "field_types": field_types})

    @application.post("/api/settings")
    async def api_post_settings(request: Request):
        from wordgrid.settings import update_settings, get_editable_settings
        try:
            body = await request.json()
        except ValueError:
            raise HTTPException(400, "Request body is not valid JSON")
        if not isinstance(body, dict):
            raise HTTPException(400, "Expected a JSON object of setting names to values")
        errors = update_settings(settings, **body)
        if "LOG_LEVEL" in body and "LOG_LEVEL" not in errors:
            logging.getLogger().setLevel(settings.LOG_LEVEL)
        if errors:
            return JSONResponse({"updated": get_editable_settings(settings), "errors": errors}, status_code=400)
        logger.info("Settings updated: %s", body)
        return JSONResponse({"updated": get_editable_settings(settings)})

    return application


app = create_app()
