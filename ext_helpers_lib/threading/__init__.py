from ext_helpers_lib.threading.task_results import create_task_result

__all__ = ["create_task_result"]
