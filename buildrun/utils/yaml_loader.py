from ruamel.yaml import YAML


def get_yaml_instance() -> YAML:
    # pipeline files are only read; safe loading yields plain dict/list/str for pydantic
    yaml = YAML(typ="safe", pure=True)
    yaml.allow_duplicate_keys = False
    return yaml
