"""Main application coordinator."""

from __future__ import annotations

import asyncio
import logging
import signal
import socket
from typing import Optional, TextIO

from .config import resolve_layout
from .demo import DemoSource
from .glyphs import DEFAULT_PALETTE
from .i18n import t
from .models import AppConfig, Layout
from .render import FrameRenderer
from .sensors import SampleSource, ThermalZoneSource
from .terminal import Terminal, get_terminal_size
from .tui import ChartDashboard
from .window import SampleWindow

logger = logging.getLogger(__name__)


class TtyTempApp:
    """Wires the sensor source, window, renderer and terminal together.

    Construction validates everything that can fail before the screen is
    taken over: the layout (ConfigError) and the sensor zones
    (SensorReadError).
    """

    def __init__(
        self,
        config: AppConfig,
        demo: bool = False,
        stream: Optional[TextIO] = None,
        source: Optional[SampleSource] = None,
        keyboard: bool = True,
    ) -> None:
        self._config = config
        rows, columns = get_terminal_size(config.rows, config.columns)
        self._layout: Layout = resolve_layout(rows, columns)

        if source is not None:
            self._source = source
        elif demo:
            self._source = DemoSource()
        else:
            self._source = ThermalZoneSource(config.thermal_dir, only=config.zones)

        color = not config.monochrome
        self._renderer = FrameRenderer(
            rows=self._layout.chart_rows,
            hostname=socket.gethostname(),
            color=color,
            palette=DEFAULT_PALETTE,
            zone_labels=[z.label for z in self._source.zones()],
            width=self._layout.capacity,
            screen_width=self._layout.columns,
            tag=t("tui_demo_tag") if demo else "",
        )
        self._terminal = Terminal(stream, color=color)
        self._dashboard = ChartDashboard(
            source=self._source,
            window=SampleWindow(self._layout.capacity),
            renderer=self._renderer,
            terminal=self._terminal,
            interval=config.interval,
            keyboard=keyboard,
        )

    @property
    def layout(self) -> Layout:
        return self._layout

    @property
    def dashboard(self) -> ChartDashboard:
        return self._dashboard

    async def run(self) -> None:
        """Run the dashboard until a quit key or a shutdown signal."""
        loop = asyncio.get_running_loop()
        installed = []
        for sig in (signal.SIGINT, signal.SIGTERM):
            try:
                loop.add_signal_handler(sig, self._handle_shutdown)
                installed.append(sig)
            except (NotImplementedError, RuntimeError, ValueError):
                # Not on the main thread, or unsupported platform
                pass

        logger.info(
            "Starting ttytemp: %dx%d terminal, %d chart rows, %d columns",
            self._layout.columns,
            self._layout.rows,
            self._layout.chart_rows,
            self._layout.capacity,
        )
        try:
            await self._dashboard.run()
        finally:
            for sig in installed:
                loop.remove_signal_handler(sig)

    def _handle_shutdown(self) -> None:
        """Handle shutdown signal."""
        logger.info("Shutdown signal received")
        self._dashboard.request_quit()
