"""Core tmplfuncs functionality: functions, rendering, configuration."""
