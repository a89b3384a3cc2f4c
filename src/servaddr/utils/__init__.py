"""src/servaddr/utils/__init__.py"""
