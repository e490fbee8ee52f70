"""
libheif binding configuration

Configures the generator for the Go interface to libheif:
- header locations for the multiarch include directory
- license and cgo preamble of the generated file
- enums to export and their member prefixes
"""

import sys

from enum_gen import Generator

try:
    ARCH = getattr(sys, 'implementation', sys)._multiarch
except AttributeError:
    # Not a multiarch aware Python
    ARCH = sys.platform

HEADER_FILE = f'/usr/include/{ARCH}/libheif/heif.h'
VERSION_HEADER_FILE = f'/usr/include/{ARCH}/libheif/heif_version.h'

PREAMBLE = """/*
 * Go interface to libheif
 *
 * Copyright (c) 2018-2024 struktur AG, Joachim Bauch <bauch@struktur.de>
 *
 * libheif is free software: you can redistribute it and/or modify
 * it under the terms of the GNU Lesser General Public License as
 * published by the Free Software Foundation, either version 3 of
 * the License, or (at your option) any later version.
 *
 * libheif is distributed in the hope that it will be useful,
 * but WITHOUT ANY WARRANTY; without even the implied warranty of
 * MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
 * GNU Lesser General Public License for more details.
 *
 * You should have received a copy of the GNU Lesser General Public License
 * along with libheif.  If not, see <http://www.gnu.org/licenses/>.
 */

package libheif

// #cgo pkg-config: libheif
// #include <stdlib.h>
// #include <string.h>
// #include <libheif/heif.h>
import "C"

const build_version = {version}
"""

# Enums in output order, mapped to the prefix their members use
ENUMS = {
    'heif_error_code': 'heif_error',
    'heif_suberror_code': 'heif_suberror',
    'heif_compression_format': 'heif_compression',
    'heif_chroma': None,
    'heif_colorspace': None,
    'heif_channel': None,
    'heif_progress_step': None,
    'heif_chroma_downsampling_algorithm': 'heif_chroma_downsampling',
    'heif_chroma_upsampling_algorithm': 'heif_chroma_upsampling',
}


def configure(gen: Generator):
    """Register the libheif enums"""
    for name, prefix in ENUMS.items():
        gen.enum(name, prefix)


def create(header_path: str = HEADER_FILE, version_header_path: str = VERSION_HEADER_FILE,
           verbose: bool = True) -> Generator:
    """Create a generator configured for libheif"""
    gen = Generator(
        header_path=header_path,
        version_header_path=version_header_path,
        preamble=PREAMBLE,
        prefix='heif_',
        verbose=verbose,
    )
    configure(gen)
    return gen
