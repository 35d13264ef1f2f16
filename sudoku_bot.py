import asyncio
import html
import logging

from telegram import Update
from telegram.ext import Application, MessageHandler, ContextTypes, filters

from sudoku_config import load_config, setup_logging
from sudoku_core import InvalidInput, InvalidPuzzle, Unsolvable, solve_puzzle
from sudoku_text import parse_grid, format_grid

logger = logging.getLogger(__name__)

USAGE = "Send the sudoku as 9 lines of 9 digits (0 or . for empty cells)"


def solve_text(text):
    """Turn a message into the reply text. Raises the sudoku_core errors."""
    grid = parse_grid(text)
    original = format_grid(grid)
    solve_puzzle(grid)
    return f"📝 Puzzle:\n{original}\n\n✅ Solution:\n{format_grid(grid)}"


async def handle_text(update: Update, context: ContextTypes.DEFAULT_TYPE):
    try:
        reply = await asyncio.to_thread(solve_text, update.message.text)
    except InvalidInput as e:
        reply = f"❌ {e}\n\n{USAGE}"
    except InvalidPuzzle:
        reply = "❌ Invalid puzzle: a digit repeats in a row, column or box."
    except Unsolvable:
        reply = "❌ This puzzle is unsolvable."
    else:
        logger.info("solved puzzle for chat %s", update.effective_chat.id if update.effective_chat else "?")
    await update.message.reply_text(f"<pre>{html.escape(reply)}</pre>", parse_mode="HTML")


def build_application(token):
    app = Application.builder().token(token).build()
    app.add_handler(MessageHandler(filters.TEXT & ~filters.COMMAND, handle_text))
    return app


def main():
    config = load_config()
    setup_logging(config.log_level)
    if not config.bot_token:
        raise RuntimeError("SUDOKU_BOT_TOKEN is not set")
    app = build_application(config.bot_token)
    logger.info("Bot started")
    app.run_polling()


if __name__ == "__main__":
    main()
