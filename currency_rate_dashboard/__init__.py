"""Currency rate dashboard: monthly exchange rates as a chart plus a period average."""
