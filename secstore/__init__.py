"""secstore - native-id keyed security storage for trading-system adapters."""

__version__ = "0.1.0"
