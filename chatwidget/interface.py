# interface.py

from dataclasses import replace
from typing import Optional

from .config import WidgetConfig
from .conversation import Conversation
from .display import Display
from .logger import Logger
from .stream import Stream

class Interface:
    """
    Main entry point that assembles our Display, Stream, and Conversation.
    """

    def __init__(self, endpoint: Optional[str] = None,
                 logging_enabled: bool = False,
                 log_file: Optional[str] = None,
                 config: Optional[WidgetConfig] = None):
        """
        Initialize components with an optional endpoint and logging.

        Args:
            endpoint: Responder URL. If None, embedded mode is used.
            logging_enabled: Enable detailed logging.
            log_file: Path to log file. Use "-" for stdout.
            config: Full settings; `endpoint` overrides its endpoint when given.
        """
        config = config or WidgetConfig()
        if endpoint:
            config = replace(config, endpoint=endpoint)
        self.config = config
        self._init_components(logging_enabled, log_file)

    def _init_components(self, logging_enabled: bool, log_file: Optional[str]) -> None:
        try:
            self.logger = Logger(__name__, logging_enabled, log_file)
            self.display = Display()
            self.stream = Stream.create(
                self.config.endpoint, logger=self.logger, timeout=self.config.request_timeout
            )
            self.conv = Conversation(
                display=self.display,
                stream=self.stream,
                config=self.config,
                logger=self.logger,
            )

            self.is_remote_mode = self.config.endpoint is not None
            if self.is_remote_mode:
                self.logger.debug(f"Initialized in remote mode with endpoint: {self.config.endpoint}")
            else:
                self.logger.debug("Initialized in embedded mode")

        except Exception as e:
            if hasattr(self, 'logger'):
                self.logger.error(f"Init error: {e}")
            raise

    def start(self) -> None:
        """Run the chat until the user types exit or quit."""
        self.conv.start()
