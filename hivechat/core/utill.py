from inflection import camelize, pluralize, underscore


def table_name_for(class_name: str) -> str:
    """GroupModel -> group_models"""
    return pluralize(underscore(class_name))


def to_camel(string: str) -> str:
    """Alias generator for API schemas: provider_id -> providerId"""
    return camelize(string, False)
