from .schemas import MachineCounts, SimulationConfig, parse_config
