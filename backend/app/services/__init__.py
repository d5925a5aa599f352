# Services package init
"""
ArticleDesk Backend — Services Layer
======================================

Service Inventory:
    - ArticleService: list / new / edit / save / read page logic
    - article_mapper: explicit Article ↔ ArticleInput / ArticleResponse mapping
"""
