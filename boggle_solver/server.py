import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from boggle_solver.settings import settings

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
logger = logging.getLogger("boggle")

# Populated at startup
_trie = None


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _board_rows(payload: dict, width: int, height: int) -> list[str]:
    board = payload.get("board")
    if isinstance(board, str):
        # Flat string, row-major
        if len(board) != width * height:
            raise HTTPException(400, f"Board has {len(board)} cells, expected {width * height}")
        return [board[r * width:(r + 1) * width] for r in range(height)]
    if isinstance(board, list) and all(isinstance(row, str) for row in board):
        return board
    raise HTTPException(400, "'board' must be a string or a list of row strings")


def create_app() -> FastAPI:
    from contextlib import asynccontextmanager

    @asynccontextmanager
    async def lifespan(application: FastAPI):
        global _trie

        from boggle_solver.solver import load_trie
        dict_path = settings.DICTIONARY_PATH
        if dict_path.exists():
            logger.info("Loading dictionary from %s", dict_path)
            # Every entry is kept; BoardSearch applies MIN_WORD_LENGTH per request
            _trie = load_trie(str(dict_path), min_length=1)
            logger.info("Trie loaded")
        else:
            logger.warning("No dictionary at %s, requests must supply 'words'", dict_path)

        yield

    application = FastAPI(title="Boggle Solver", lifespan=lifespan)

    @application.get("/health")
    async def health():
        return {"status": "ok", "trie_loaded": _trie is not None}

    @application.post("/solve")
    async def solve(request: Request):
        from boggle_solver.game_io import BoardInputError, parse_board
        from boggle_solver.metrics import StageTimer
        from boggle_solver.solver import BoardSearch, Trie

        try:
            payload = await request.json()
        except ValueError:
            raise HTTPException(400, "Request body must be JSON")
        if not isinstance(payload, dict):
            raise HTTPException(400, "Request body must be a JSON object")

        timer = StageTimer()

        with timer.stage("parse"):
            width = payload.get("width")
            height = payload.get("height")
            if not _is_int(width) or not _is_int(height):
                raise HTTPException(400, "'width' and 'height' must be integers")
            rows = _board_rows(payload, width, height)
            try:
                board = parse_board(width, height, rows, settings.MAX_BOARD_CELLS)
            except BoardInputError as e:
                raise HTTPException(400, str(e))

        words = payload.get("words")
        if words is not None:
            if not isinstance(words, list) or not all(isinstance(w, str) for w in words):
                raise HTTPException(400, "'words' must be a list of strings")
            with timer.stage("trie_build"):
                trie = Trie(w for w in words if len(w) >= settings.MIN_WORD_LENGTH)
        elif _trie is not None:
            trie = _trie
        else:
            raise HTTPException(503, "No dictionary loaded and no 'words' supplied")

        strict = payload.get("strict_adjacency", settings.STRICT_ADJACENCY)
        if not isinstance(strict, bool):
            raise HTTPException(400, "'strict_adjacency' must be true or false")
        logger.info("Board %dx%d: %s", width, height, " / ".join(rows))

        with timer.stage("solve"):
            search = BoardSearch(
                width, height, board,
                trie=trie,
                min_length=settings.MIN_WORD_LENGTH,
                strict_adjacency=strict,
            )
            all_words = search.solve()

        found = all_words[:settings.MAX_RESULTS] if settings.MAX_RESULTS > 0 else all_words
        logger.info("Found %d words (returning %d)", len(all_words), len(found))

        return JSONResponse({
            "width": width,
            "height": height,
            "words": found,
            "word_count": len(found),
            "processing_time": timer.total_ms,
            "stage_timings": timer.summary(),
            "search_stats": search.stats.as_dict(),
        })

    @application.get("/api/settings")
    async def api_get_settings():
        from boggle_solver.settings import get_editable_settings, EDITABLE_FIELDS
        values = get_editable_settings(settings)
        field_types = {k: v.__name__ for k, v in EDITABLE_FIELDS.items()}
        return JSONResponse({"settings": values, "field_types": field_types})

    @application.post("/api/settings")
    async def api_post_settings(request: Request):
        from boggle_solver.settings import update_settings, get_editable_settings
        try:
            body = await request.json()
        except ValueError:
            raise HTTPException(400, "Request body must be JSON")
        if not isinstance(body, dict):
            raise HTTPException(400, "Request body must be a JSON object")
        errors = update_settings(settings, **body)
        if errors:
            return JSONResponse({"updated": get_editable_settings(settings), "errors": errors}, status_code=400)
        logger.info("Settings updated: %s", body)
        logger.setLevel(logging.DEBUG if settings.DEBUG else logging.INFO)
        return JSONResponse({"updated": get_editable_settings(settings)})

    return application


app = create_app()
