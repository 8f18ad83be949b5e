import os
from abc import ABC, abstractmethod

import cv2
import numpy as np

from orthomaze.core.errors import MazeSaveError
from orthomaze.core.grid import Grid


class Saveable(ABC):
    """A formatted maze that knows how to write itself to disk."""

    @abstractmethod
    def save(self, path: str) -> str:
        """
        Writes the data to 'path' (relative paths resolve against the working directory).
        Returns a success message, raises MazeSaveError on any failure.
        """
        pass


class Formatter(ABC):
    @abstractmethod
    def format(self, grid: Grid) -> Saveable:
        pass


def resolve_path(path: str) -> str:
    try:
        cwd = os.getcwd()
    except OSError as e:
        raise MazeSaveError(f"Couldn't find path to current dir: {e}") from e
    return os.path.join(cwd, path)


class StringWrapper(Saveable):
    def __init__(self, text: str):
        self.text = text

    def into_inner(self) -> str:
        return self.text

    def __str__(self) -> str:
        return self.text

    def save(self, path: str) -> str:
        path = resolve_path(path)

        try:
            f = open(path, "w", encoding="utf-8")
        except OSError as e:
            raise MazeSaveError(f"Couldn't create {path}: {e}") from e

        # Closing flushes the buffer, so write errors can surface there too
        try:
            with f:
                f.write(self.text)
        except OSError as e:
            raise MazeSaveError(f"Couldn't write to {path}: {e}") from e

        return f"Maze was successfully written to a file: {path}"


class ImageWrapper(Saveable):
    """Wraps an RGB image as a (height, width, 3) uint8 array."""

    def __init__(self, pixels: np.ndarray):
        self.pixels = pixels

    def into_inner(self) -> np.ndarray:
        return self.pixels

    def save(self, path: str) -> str:
        path = resolve_path(path)

        if self.pixels.size == 0:
            raise MazeSaveError(f"Couldn't encode image {path}: the image has no pixels")

        try:
            # OpenCV expects BGR
            frame = cv2.cvtColor(self.pixels, cv2.COLOR_RGB2BGR)
            written = cv2.imwrite(path, frame)
        except cv2.error as e:
            raise MazeSaveError(f"Couldn't encode image {path}: {e}") from e

        if not written:
            raise MazeSaveError(f"Couldn't write image to {path}")

        return f"Maze was successfully saved as an image: {path}"
