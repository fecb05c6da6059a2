from .chomp_env import ChompEnv

__all__ = ['ChompEnv']
