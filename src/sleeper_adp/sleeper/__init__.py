from sleeper_adp.sleeper.client import SleeperClient
from sleeper_adp.sleeper.protocol import DraftSource

__all__ = ["DraftSource", "SleeperClient"]
