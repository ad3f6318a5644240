# site_crawler/parser/__init__.py
