from pathlib import Path

from endstone.plugin import Plugin

from .block_logger import BlockBreakLogger
from .config import install_default_config, load_config


class HydraMC(Plugin):  # PLUGIN
    prefix = "HydraMC"
    api_version = "0.6"

    def __init__(self):
        super().__init__()
        self.block_logger = None

    def on_enable(self) -> None:
        self.logger.info("Enabling HydraMC")
        self.installation_path = Path(self.data_folder).resolve()

        config_path = install_default_config(self.installation_path, self.logger)
        self.hydra_config = load_config(config_path, self.logger)

        self.block_logger = BlockBreakLogger(
            plugin=self,
            broadcaster=self.server,
            logger=self.logger,
            config=self.hydra_config,
        )
        self.register_events(self.block_logger)

        self.logger.info(
            f"[BlockBreakLogger] Registered (break: {self.hydra_config['broadcast_block_break']}, "
            f"place: {self.hydra_config['broadcast_block_place']})"
        )

    def on_disable(self) -> None:
        self.logger.info("Disabling HydraMC")
        self.block_logger = None
