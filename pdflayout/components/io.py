"""
文件路径：pdflayout/components/io.py

说明：文件与路径校验，以及图片解码入口。

图片解码的三个失败点互相独立、可分别捕获：
- ImageOpenError：输入源无法打开（路径不存在/不可读）；
- ImageFormatError：无法识别图片格式；
- ImageDecodeError：格式已识别，但数据无法解码。
三者均继承 ImageLoadError，并携带 err_code 与 source 便于调用侧区分处理。
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import BinaryIO, Optional, Union

from PIL import Image as PILImage
from PIL import UnidentifiedImageError

from ..variables import (
    ERR_FILE_NOT_FOUND,
    ERR_PATH_NOT_WRITABLE,
    ERR_IMAGE_FORMAT_UNKNOWN,
    ERR_IMAGE_DECODE_FAILED,
)
from .logging import ErrorHandler, get_logger


logger = get_logger(__name__)


# =============================
# 文件操作
# =============================
class FileHandler:
    """文件与路径相关的通用处理器。"""

    @staticmethod
    def validate_readable_file(path: Path) -> None:
        """校验文件可读。

        参数：
            path: 文件路径。
        异常：
            FileNotFoundError: 文件不存在或不可读。
        """
        if not path.exists() or not path.is_file():
            raise FileNotFoundError(
                ErrorHandler.format_error(ERR_FILE_NOT_FOUND, f"文件不存在或不可读: {path}")
            )

    @staticmethod
    def ensure_parent_writable(target: Path) -> None:
        """确保目标文件的父目录可写，不存在则创建。

        参数：
            target: 目标文件路径。
        异常：
            PermissionError: 目录不可写。
        """
        parent = target.parent
        parent.mkdir(parents=True, exist_ok=True)
        # Windows 上 os.access 可能不可靠，尝试创建临时文件验证
        probe = parent / f".__writable_probe_{int(time.time()*1000)}"
        try:
            with open(probe, "w", encoding="utf-8") as f:  # noqa: P103
                f.write("probe")
        except OSError as exc:
            raise PermissionError(
                ErrorHandler.format_error(ERR_PATH_NOT_WRITABLE, f"目录不可写: {parent}")
            ) from exc
        probe.unlink(missing_ok=True)


# =============================
# 图片解码错误
# =============================
class ImageLoadError(RuntimeError):
    """图片加载失败的基类。"""

    def __init__(self, err_code: int, message: str, source: Optional[str] = None) -> None:
        super().__init__(ErrorHandler.format_error(err_code, message))
        self.err_code = err_code
        self.source = source


class ImageOpenError(ImageLoadError):
    """输入源无法打开。"""


class ImageFormatError(ImageLoadError):
    """无法识别图片格式。"""


class ImageDecodeError(ImageLoadError):
    """图片数据解码失败。"""


# =============================
# 图片解码入口
# =============================
def _decode(fp: Union[str, BinaryIO], source: str) -> PILImage.Image:
    # Image.open 只读取文件头以识别格式；load() 才真正解码像素数据
    try:
        img = PILImage.open(fp)
    except UnidentifiedImageError as exc:
        raise ImageFormatError(ERR_IMAGE_FORMAT_UNKNOWN, f"无法识别图片格式: {source}", source) from exc
    try:
        img.load()
    except (OSError, ValueError, SyntaxError) as exc:
        raise ImageDecodeError(ERR_IMAGE_DECODE_FAILED, f"图片解码失败: {source}（{exc}）", source) from exc
    logger.debug("图片已解码：%s format=%s size=%s mode=%s", source, img.format, img.size, img.mode)
    return img


def load_image_from_path(path: Union[str, Path]) -> PILImage.Image:
    """从文件路径加载并解码图片。

    异常：
        ImageOpenError / ImageFormatError / ImageDecodeError
    """
    p = Path(path)
    try:
        FileHandler.validate_readable_file(p)
        fh = open(p, "rb")  # noqa: SIM115
    except OSError as exc:
        raise ImageOpenError(ERR_FILE_NOT_FOUND, f"无法打开图片文件: {p}", str(p)) from exc
    with fh:
        return _decode(fh, str(p))


def load_image_from_stream(stream: BinaryIO, name: str = "<stream>") -> PILImage.Image:
    """从可 seek 的二进制流加载并解码图片。

    异常：
        ImageOpenError / ImageFormatError / ImageDecodeError
    """
    try:
        stream.seek(0)
    except (AttributeError, OSError, ValueError) as exc:
        raise ImageOpenError(ERR_FILE_NOT_FOUND, f"无法读取图片数据流: {name}", name) from exc
    return _decode(stream, name)


__all__ = [
    "FileHandler",
    "ImageLoadError",
    "ImageOpenError",
    "ImageFormatError",
    "ImageDecodeError",
    "load_image_from_path",
    "load_image_from_stream",
]
