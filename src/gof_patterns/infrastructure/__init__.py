"""Technical infrastructure: logging, console sinks, registries."""
