#!/usr/bin/env python3

# Copyright (C) 2022 The simecc developers
#
# This file is part of simecc. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of simecc including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the simecc package."

name = "simecc"
__version__ = "2022.6.1"
__author__ = "The simecc developers"
__author_email__ = "devs@simecc.org"
__copyright__ = "Copyright (C) 2022 The simecc developers"
__license__ = "MIT License"
