import enum


class UnitType(enum.Enum):
    PILLS = 'pills'
    MG = 'mg'


class ScheduleType(enum.Enum):
    INTERVAL = 'interval'
    PER_DAY = 'per_day'
