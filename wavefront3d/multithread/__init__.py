from wavefront3d.multithread.task_pool import TaskPool

__all__ = ["TaskPool"]
