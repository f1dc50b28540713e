"""
App layer: HTTP server (FastAPI).

Roles:
- JSON API: /api/contact, /api/health
- static site from public/ with index.html fallback
- email sending delegated to providers/
"""
