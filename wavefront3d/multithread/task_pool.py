# wavefront3d/multithread/task_pool.py
# ---------------------------------------------------------------
# Простой пул задач на основе concurrent.futures.
# Используется загрузчиком для параллельного чтения MTL‑библиотек.
# ---------------------------------------------------------------

from concurrent.futures import ThreadPoolExecutor
import queue

class TaskPool:
    """Пул готового количества потоков; задачи принимаются как callables."""
    def __init__(self, max_workers=None):
        self.executor = ThreadPoolExecutor(max_workers=max_workers)
        self.tasks = queue.Queue()
        self._shutdown = False

    def submit(self, fn, *args, **kwargs):
        """Отправить задачу в пул, вернуть Future."""
        if self._shutdown:
            raise RuntimeError("TaskPool already shut down")
        future = self.executor.submit(fn, *args, **kwargs)
        self.tasks.put(future)
        return future

    def map_ordered(self, fn, items):
        """Выполнить `fn` для каждого элемента параллельно; результаты – в порядке `items`."""
        if self._shutdown:
            raise RuntimeError("TaskPool already shut down")
        # в очередь wait_all не попадают: результаты забираются здесь же
        futures = [self.executor.submit(fn, item) for item in items]
        return [future.result() for future in futures]

    def wait_all(self):
        """Блокировать до завершения всех поставленных задач."""
        while not self.tasks.empty():
            future = self.tasks.get()
            future.result()  # пробрасывает исключения, если они возникли

    def shutdown(self, wait=True):
        self._shutdown = True
        self.executor.shutdown(wait=wait)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.shutdown()
