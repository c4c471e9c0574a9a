"""API views over the model container."""
