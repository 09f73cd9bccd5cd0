"""Control logic for a rail-mounted sentry robot: PID loops, filters, gimbal yaw tracking, vision aiming and chassis positioning."""

__version__ = "0.1.0"