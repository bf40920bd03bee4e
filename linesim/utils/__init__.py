from .event_log import BORDER, bordered, format_record
