"""
Service layer: actions that turn user intent and loaded files into change
batches for the Model.
"""
