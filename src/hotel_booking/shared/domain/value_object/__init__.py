from .date_range import DateRange as DateRange
