from dataface.core.time.abc import Time
from dataface.core.time.real import RealTime

__all__ = ["RealTime", "Time"]
