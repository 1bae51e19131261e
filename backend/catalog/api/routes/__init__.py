"""API Routes: health probes and listing endpoints."""
