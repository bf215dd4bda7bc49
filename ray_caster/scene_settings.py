from dataclasses import dataclass


@dataclass(slots=True)
class SceneSettings:
    workers: int = 1
    rows_per_chunk: int = 0 # 0 derives the band height from the worker count

    def __post_init__(self) -> None:
        self.workers = int(self.workers)
        self.rows_per_chunk = int(self.rows_per_chunk)
        if self.workers < 1:
            raise ValueError(f"workers must be at least 1, got {self.workers}")
        if self.rows_per_chunk < 0:
            raise ValueError(f"rows_per_chunk must not be negative, got {self.rows_per_chunk}")
