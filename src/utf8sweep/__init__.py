# SPDX-FileCopyrightText: 2025-present DouglasMacKrell <d.mackrell@gmail.com>
#
# SPDX-License-Identifier: MIT

"""utf8sweep - Recursive BOM-based UTF-8 file converter."""

from utf8sweep.__about__ import __version__

__all__ = ["__version__"]
