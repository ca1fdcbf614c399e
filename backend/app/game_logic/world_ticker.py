# backend/app/game_logic/world_ticker.py
import asyncio
import logging
import time
from typing import Awaitable, Callable, Dict, Optional

from app.commands.utils import build_game_view
from app.core.config import settings
from app.game_state import get_game
from app.game_logic.movement import handle_linger
from app.websocket_manager import connection_manager as ws_manager

logger = logging.getLogger(__name__)

# --- Task Registry ---
world_tick_tasks: Dict[str, Callable[[], Awaitable[None]]] = {}


async def advance_lingering_players_task():
    """
    Every tick counts as a turn spent standing still for each session playing
    over a WebSocket. The narrative goes straight to that session's socket.
    """
    for session_id in ws_manager.get_all_active_session_ids():
        state = get_game(session_id)
        if state is None or state.is_over() or state.shop_mode or state.throwing_repellent:
            continue
        message = handle_linger(state)
        await ws_manager.send_personal_message(
            {
                "type": "game_update",
                "log": [message],
                "game": build_game_view(state).model_dump(),
                "game_over": state.is_over(),
            },
            session_id,
        )


def register_world_tick_task(task_name: str, task_func: Callable[[], Awaitable[None]]):
    if task_name in world_tick_tasks:
        logger.warning(f"World tick task '{task_name}' is being redefined.")
    world_tick_tasks[task_name] = task_func


def _initialize_and_register_all_world_tasks():
    logger.info("World Ticker: Initializing and registering world tick tasks...")
    if settings.LINGER_TICKS_ENABLED:
        register_world_tick_task("linger_advancer", advance_lingering_players_task)
    logger.info(f"World Ticker: All tasks registered. Active tasks: {list(world_tick_tasks.keys())}")


_initialize_and_register_all_world_tasks()


async def run_world_tick():
    tasks_to_run = list(world_tick_tasks.items())
    for task_name, task_func in tasks_to_run:
        try:
            await task_func()
        except Exception as e:
            logger.error(f"ERROR in world_tick task '{task_name}': {e}", exc_info=True)


async def world_ticker_loop():
    interval = settings.WORLD_TICK_INTERVAL_SECONDS
    logger.info(f"World Ticker: Loop now running with interval: {interval}s.")
    while True:
        start_time = time.time()

        if not world_tick_tasks:
            await asyncio.sleep(interval)
            continue

        await run_world_tick()

        processing_time = time.time() - start_time
        sleep_duration = interval - processing_time
        if sleep_duration < 0:
            logger.warning(f"World tick processing time ({processing_time:.2f}s) exceeded interval ({interval}s).")
            sleep_duration = 0

        await asyncio.sleep(sleep_duration)


_world_ticker_task_handle: Optional[asyncio.Task] = None


def start_world_ticker_task():
    global _world_ticker_task_handle
    if _world_ticker_task_handle is None or _world_ticker_task_handle.done():
        logger.info("World Ticker: Attempting to start task...")
        _world_ticker_task_handle = asyncio.create_task(world_ticker_loop())
        logger.info("World Ticker: Task created and running.")
    else:
        logger.info("World Ticker: Task already running.")


def stop_world_ticker_task():
    global _world_ticker_task_handle
    if _world_ticker_task_handle and not _world_ticker_task_handle.done():
        logger.info("World Ticker: Attempting to stop task...")
        _world_ticker_task_handle.cancel()
        _world_ticker_task_handle = None
        logger.info("World Ticker: Task cancellation requested.")
    else:
        logger.info("World Ticker: Task not running or already stopped.")
