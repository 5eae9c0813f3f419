# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2024-present Datadog, Inc.

"""Here we collect a set of OS wrappers and adaptors to be easily replaced during testing and debugging."""

import os
import shutil


def run_command(command: str) -> int:
    return os.system(f"{command} >&2")


def path_exists(file_path: str) -> bool:
    return os.path.exists(file_path)


def is_absolute_path(file_path: str) -> bool:
    return os.path.isabs(file_path)


def create_dirs(path: str) -> None:
    os.makedirs(path, exist_ok=True)


def get_directory_name(file_path: str) -> str:
    return os.path.dirname(os.path.abspath(file_path))


def get_base_name(file_path: str) -> str:
    return os.path.basename(file_path)


def open_file(file_path: str, encoding: str = "utf-8") -> str:
    try:
        with open(file_path, "r", encoding=encoding) as file:
            return file.read()
    except UnicodeDecodeError:
        try:
            with open(file_path, "r", encoding="utf-16") as file:
                return file.read()
        except UnicodeDecodeError:
            with open(file_path, "r", encoding=None) as file:
                return file.read()


def write_file(file_path: str, content: str, encoding: str = "utf-8") -> None:
    with open(file_path, "w", encoding=encoding) as file:
        file.write(content)


def read_binary_file(file_path: str) -> bytes:
    with open(file_path, "rb") as file:
        return file.read()


def write_binary_file(file_path: str, content: bytes) -> None:
    with open(file_path, "wb") as file:
        file.write(content)


def copy_file(source_path: str, target_path: str) -> None:
    shutil.copyfile(source_path, target_path)


def path_join(path: str, *paths: str) -> str:
    return os.path.join(path, *paths)
