"""
Engine

Timer scheduling (engine.scheduler, engine.virtual_scheduler) and the
canvas update-cycle controller (engine.animation_controller).

Import from the submodules directly; the services layer depends on
engine.scheduler, so this package does not re-export the controller.
"""
