# bot/cogs/__init__.py
"""
Discord cogs package.

Cogs in this package are loaded by the bot via load_extension() in
bot/main.py (see EXTENSIONS). Each cog module defines an async setup()
function that registers the cog with the bot.
"""
