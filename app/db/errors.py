class DuplicateEntityError(ValueError):
    """Нарушение ограничения уникальности в хранилище"""
