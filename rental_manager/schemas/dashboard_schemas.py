from pydantic import BaseModel


class OccupancyStats(BaseModel):
    """Room occupancy summary for the owner dashboard"""

    total: int
    occupied: int
    vacant: int
    occupancy_rate: float  # percent, one decimal


class RevenueStats(BaseModel):
    """Current month rent collection summary"""

    current: int | float  # sum of paid amounts this month
    expected: int | float  # rent due from occupied rooms
    collected: int  # number of paid records this month
    pending: int  # occupied rooms without a paid record
