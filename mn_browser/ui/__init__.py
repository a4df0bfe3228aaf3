"""
Dash adapter: layout, callbacks and app factory around the Model/State core.
"""
