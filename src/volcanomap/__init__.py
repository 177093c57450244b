"""Interactive scatter map of volcanoes by type and elevation."""
