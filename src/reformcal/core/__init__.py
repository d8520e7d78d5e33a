"""Calendar rules and the CalendarDate value type."""
