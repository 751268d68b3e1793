"""Server — ASGI request pipeline, response sending, and launcher."""
