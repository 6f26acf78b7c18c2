"""Mining statistics shared between the client, the miner and the user interface."""

from dataclasses import dataclass, field

GPS_HISTORY = 50


@dataclass
class SolutionStats:
    """Counts of solutions found and their fate at the server."""

    num_solutions_found: int = 0
    num_shares_accepted: int = 0
    num_rejected: int = 0
    num_staled: int = 0
    num_blocks_found: int = 0


@dataclass
class MiningStats:
    """State of the mining process, including a rolling graphs-per-second history."""

    block_height: int = 0
    target_difficulty: int = 0
    solution_stats: SolutionStats = field(default_factory=SolutionStats)
    device_stats: list = field(default_factory=list)
    _gps_history: list = field(default_factory=list, init=False, repr=False)

    def add_combined_gps(self, val: float) -> None:
        """Record a combined graphs-per-second sample, keeping the latest 50."""
        self._gps_history.insert(0, val)
        del self._gps_history[GPS_HISTORY:]

    def combined_gps(self) -> float:
        """Average of the recorded samples, or 0.0 when there are none."""
        if not self._gps_history:
            return 0.0
        return sum(self._gps_history) / len(self._gps_history)


@dataclass
class ClientStats:
    """State of the connection to the stratum server."""

    server_url: str = ""
    connected: bool = False
    connection_status: str = "Connection Status: Starting"
    last_message_sent: str = "Last Message Sent: None"
    last_message_received: str = "Last Message Received: None"


@dataclass
class Stats:
    """Client and mining statistics together."""

    client_stats: ClientStats = field(default_factory=ClientStats)
    mining_stats: MiningStats = field(default_factory=MiningStats)