"""
The MODEL layer contains pure data structures and business logic.
It has NO knowledge of the GUI (Qt).
It deals with the dataset, geographic extents, classification, layout,
projection, colour mapping and interaction state.
"""
