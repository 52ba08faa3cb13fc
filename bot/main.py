# bot/main.py
"""Main entry point for the Game Jam Bot."""
import asyncio
import logging
import signal
import sys

import discord
from aiohttp import web
from discord.ext import commands
from dotenv import load_dotenv

from bot.config import Config
from bot.help import JamHelpCommand
from bot.services.roles import has_role
from bot.services.state import PersistentState
from bot.services.team_channels import TeamChannelService
from config.messages import addressed

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)

EXTENSIONS = (
    "bot.cogs.general",
    "bot.cogs.channels",
    "bot.cogs.themes",
    "bot.cogs.roles",
)


class GameJamBot(commands.Bot):
    """Discord bot running the operational side of a game jam."""

    def __init__(self, config: Config, state: PersistentState | None = None) -> None:
        intents = discord.Intents.default()
        intents.message_content = True
        intents.members = True
        super().__init__(
            command_prefix="!",
            intents=intents,
            help_command=JamHelpCommand(),
            # Theme ideas are echoed into guild channels, so only user mentions may ping
            allowed_mentions=discord.AllowedMentions(everyone=False, roles=False, users=True),
        )
        self.config = config
        self.state = state if state is not None else PersistentState(config.state_file)
        self.team_channels = TeamChannelService(self.state)
        self._health_app: web.Application | None = None
        self._health_runner: web.AppRunner | None = None

    async def setup_hook(self) -> None:
        """Called when bot is starting up."""
        for extension in EXTENSIONS:
            await self.load_extension(extension)
            logger.info(f"Loaded extension {extension}")
        await self._start_health_server()

    async def on_ready(self) -> None:
        """Called when bot is fully connected."""
        if self.user:
            logger.info(f"Logged in as {self.user} (ID: {self.user.id})")
        logger.info(f"Connected to {len(self.guilds)} guilds")
        for cmd in self.commands:
            logger.info(f"Registered command: !{cmd.name}")

    async def on_message(self, message: discord.Message) -> None:
        """Only process commands sent in guilds. Direct messages are theme submissions."""
        if message.author.bot or message.guild is None:
            return
        await self.process_commands(message)

    async def on_command_error(
        self, ctx: commands.Context, error: commands.CommandError
    ) -> None:
        """Handle prefix command errors."""
        if isinstance(error, commands.CommandNotFound):
            await ctx.send(addressed(ctx.author.id, f"Unrecognised command `!{ctx.invoked_with}`."))
            await ctx.send_help()
            return

        logger.error(f"Command error in !{ctx.invoked_with}: {error}", exc_info=error)
        await ctx.send(addressed(ctx.author.id, f"Error: {error}"))

    def is_organizer(self, user: discord.abc.User) -> bool:
        return isinstance(user, discord.Member) and has_role(user, self.config.organizer_role)

    def is_jammer(self, user: discord.abc.User) -> bool:
        return isinstance(user, discord.Member) and has_role(user, self.config.jammer_role)

    async def _start_health_server(self) -> None:
        """Start the health check HTTP server."""
        self._health_app = web.Application()
        self._health_app.router.add_get("/health", self._health_handler)
        self._health_runner = web.AppRunner(self._health_app)
        await self._health_runner.setup()
        site = web.TCPSite(self._health_runner, "0.0.0.0", self.config.health_port)
        await site.start()
        logger.info(f"Health check server started on port {self.config.health_port}")

    async def _health_handler(self, request: web.Request) -> web.Response:
        """Handle health check requests."""
        return web.json_response({
            "status": "healthy",
            "latency_ms": round(self.latency * 1000, 2),
            "themes_submitted": len(self.state.theme_ideas),
            "teams": len(self.state.channel_creators),
        })

    async def close(self) -> None:
        """Clean up on shutdown."""
        if self._health_runner:
            await self._health_runner.cleanup()
        await super().close()


async def main() -> None:
    """Main entry point."""
    load_dotenv()
    config = Config()
    errors = config.validate()
    if errors:
        for error in errors:
            logger.error(f"Config error: {error}")
        sys.exit(1)

    logging.getLogger().setLevel(config.log_level)
    try:
        bot = GameJamBot(config)
    except (OSError, ValueError) as e:
        logger.error(f"Could not load state from {config.state_file}: {e}")
        sys.exit(1)

    def handle_signal(sig: signal.Signals) -> None:
        logger.info(f"Received {sig.name}, shutting down...")
        asyncio.create_task(bot.close())

    loop = asyncio.get_event_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(sig, lambda s: handle_signal(s), sig)

    try:
        await bot.start(config.discord_token)
    except Exception as e:
        logger.error(f"Bot error: {e}")
        await bot.close()
        sys.exit(1)


def run() -> None:
    """Console script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
