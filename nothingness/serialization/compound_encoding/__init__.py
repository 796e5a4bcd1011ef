# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
This module holds compound encoding implementations.

Compound encoders are encoders that are generic in some way and delegate the encoding of some portion to another
encoder. For example a `value: Optional[T]` encoder knows whether the value is there or not and delegates the rest to
an encoder that knows how to encode `T`.

Each submodule `x` deals with a single kind of value and looks like this:

    def encode_x(serializer: Serializer, value: ValueType, ...config params...) -> None:
        ...

    def decode_x(deserializer: Deserializer, ...config params...) -> ValueType:
        ...

The decoders build the `Visitor` that the protocol needs, so that callers only ever deal with encoders and decoders.
Submodules should not have to take into consideration how types are mapped to encoders.
"""

from nothingness.serialization.codec import Decoder, Encoder

__all__ = [
    'Decoder',
    'Encoder',
]
