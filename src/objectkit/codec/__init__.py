from objectkit.codec.json_codec import JsonCodec, decode, encode, loads

__all__ = ["JsonCodec", "encode", "decode", "loads"]
