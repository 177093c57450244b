"""
The VIEW layer paints AppState with QPainter and forwards Qt input events to
the model as state transitions.
"""
