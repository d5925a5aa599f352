# Routes package init
"""
ArticleDesk Backend — API Routes Package
==========================================

Route Inventory:
    - articles.py: GET  /articles               (list view)
                   GET  /articles/new           (empty form)
                   GET  /articles/{id}/edit     (pre-filled form)
                   POST /articles               (create or update)
                   GET  /articles/{id}          (read-only view)
    - health.py:   GET  /health                 (service health check)

Routes stay THIN: extract request data, call ArticleService, return the result.
"""
