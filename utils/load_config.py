import yaml


def load_config(config_file_path: str) -> dict:
    """Loads the configuration file from the given path.

    Args:
        config_file_path (str): Path to the configuration file.

    Returns:
        dict: The configuration dictionary, empty when the file has no content.
    """
    with open(config_file_path, "r", encoding="utf-8") as f:
        config = yaml.safe_load(f)

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise TypeError(
            "Configuration file {} must contain a mapping".format(config_file_path))

    return config
