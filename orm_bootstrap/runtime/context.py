from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, replace

from pydantic import BaseModel

from orm_bootstrap.runtime.config.config_data import ConfigData
from orm_bootstrap.runtime.config.config_template import load_templated_yaml
from orm_bootstrap.runtime.config.settings import EnvironmentVariables


@dataclass
class AppContext:
    """Application context containing configuration and other app-wide state."""

    config: ConfigData


def load_config(env_vars: EnvironmentVariables | None = None) -> ConfigData:
    """Load config.yaml and apply the values set directly in the environment.

    Args:
        env_vars: Environment settings to use; read from the process environment
            when omitted.

    Returns:
        ConfigData: The resolved configuration.
    """
    env_vars = env_vars or EnvironmentVariables()
    config = load_templated_yaml(env_vars.config_file, env_vars.environment)

    updates: dict = {"app": config.app.model_copy(update={"environment": env_vars.environment})}
    if env_vars.log_level:
        updates["logging"] = config.logging.model_copy(update={"level": env_vars.log_level})
    if env_vars.database_url:
        updates["database"] = config.database.model_copy(update={"url": env_vars.database_url})
    return config.model_copy(update=updates)


_default_context = AppContext(config=load_config())

_app_context: ContextVar[AppContext] = ContextVar(
    "app_context", default=_default_context
)


def get_context() -> AppContext:
    """Get the current application context."""
    return _app_context.get()


def set_context(context: AppContext) -> Token[AppContext]:
    """Set the current application context.

    Args:
        context: AppContext instance to set as current.
    """
    return _app_context.set(context)


def _explicitly_set(model: BaseModel) -> dict:
    """Dump only the fields that were explicitly set, at every nesting level.

    A nested model is included whole as soon as any of its own fields was set.
    """
    result = {}

    for field_name in model.__class__.model_fields:
        field_value = getattr(model, field_name)

        if isinstance(field_value, BaseModel):
            nested = _explicitly_set(field_value)
            if nested or field_name in model.model_fields_set:
                result[field_name] = nested or field_value.model_dump()
        elif field_name in model.model_fields_set:
            result[field_name] = field_value

    return result


def _recursive_dict_merge(base_dict: dict, override_dict: dict) -> dict:
    """Recursively merge two dictionaries, values from override_dict win."""
    result = base_dict.copy()

    for key, value in override_dict.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _recursive_dict_merge(result[key], value)
        else:
            result[key] = value

    return result


def _merge_configs(base_config: ConfigData, override_config: ConfigData) -> ConfigData:
    """Merge the explicitly set values of override_config into base_config."""
    merged_dict = _recursive_dict_merge(
        base_config.model_dump(), _explicitly_set(override_config)
    )
    return ConfigData.model_validate(merged_dict)


@contextmanager
def with_context(config_override: ConfigData | None = None):
    """Context manager for temporarily overriding the application context.

    Only the fields set on ``config_override`` replace the current values; the
    rest are inherited from the enclosing context.

    Example:
        override = ConfigData(database=DatabaseConfig(storage=":memory:"))
        with with_context(override):
            assert get_config().database.storage == ":memory:"
    """
    if config_override is None:
        yield
        return

    if not isinstance(config_override, ConfigData):
        raise ValueError(
            f"config_override must be ConfigData, or None, got {type(config_override)}"
        )

    merged_config = _merge_configs(get_context().config, config_override)

    token = set_context(replace(get_context(), config=merged_config))
    try:
        yield
    finally:
        _app_context.reset(token)


def set_config(config: ConfigData) -> None:
    """Replace the entire current configuration with the provided one."""
    set_context(replace(get_context(), config=config))


def get_config() -> ConfigData:
    """Convenience function to get the current configuration."""
    return get_context().config
