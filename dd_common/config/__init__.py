from dd_common.config.env import env_flag, parse_bool_env, parse_int_env

__all__ = ["env_flag", "parse_bool_env", "parse_int_env"]
