# innoparse

A pure-Python library with the building blocks for reading Inno Setup
installer data:

- the checksums Inno Setup stores (Adler-32, CRC32, MD5, SHA-1) and a
  `Checksum` value type that carries the kind of checksum with its value;
- the ARC4 stream cipher used for encrypted data chunks;
- conversion of stored Windows paths into safe output paths, with
  `{variable}` expansion.

It needs nothing beyond the standard library and runs on Python 3.10 and later.

## Installing

```
pip install innoparse
```

To run the tests:

```
pip install "innoparse[test]"
pytest
```

## Checksums

`Adler32`, `Crc32`, `Md5` and `Sha1` (in `innoparse.adler32`,
`innoparse.crc32`, `innoparse.md5` and `innoparse.sha1`) take data through
`update(data)` and give the result from `finalize()`. `Adler32` and `Crc32`
return a 32-bit integer; `Md5` and `Sha1` return the digest as bytes.
`finalize()` on `Md5` and `Sha1` leaves the hash usable for further updates.

```python
from innoparse.checksum import Checksum, ChecksumType
from innoparse.md5 import Md5

md5 = Md5()
md5.update(b"")
checksum = Checksum(ChecksumType.MD5, md5.finalize())
print(checksum)   # MD5 d41d8cd98f00b204e9800998ecf8427e
```

`Checksum` checks its value when built: Adler-32 and CRC32 values must be
32-bit unsigned integers, MD5 values 16 bytes and SHA-1 values 20 bytes,
otherwise `ValueError` is raised. Two checksums compare equal only when
both the type and the value match; two `ChecksumType.NONE` checksums are
always equal. `str()` gives the type followed by the value: integer values
as `0x` and eight hex digits padded with spaces, digests as lower-case hex,
and `(no checksum)` for `NONE`.

Every calculator also has `load(stream, fmt="<I")`, which reads one value of
the given `struct` format from a binary stream, feeds its raw bytes into the
checksum and returns the unpacked value. It raises `EOFError` if the stream
ends early.

`innoparse.iterated.IteratedHash` is the shared base of `Md5` and `Sha1`:
it buffers input into 64-byte blocks, does the padding and length encoding,
and calls the subclass's `transform(block)` for each block of 32-bit words.

## ARC4

```python
from innoparse.arc4 import Arc4

cipher = Arc4(b"key material")
cipher.discard(1000)
plain = cipher.crypt(encrypted_bytes)
```

`crypt` both encrypts and decrypts. An empty key raises `ValueError`.

## Output file names

```python
from innoparse.filename import FilenameMap, shorten_path

names = FilenameMap(lowercase=True, expand=True)
names["app"] = "app"
print(names.convert("{app}\\Data\\..\\Readme.txt"))   # app/readme.txt

print(shorten_path("a/./b/../c", "/"))                # a/c
```

`FilenameMap` is a `dict` from variable names to their values. With
`lowercase` set, ASCII letters are lower-cased first. With `expand` set,
`{name}` variables are replaced (variables may nest), `{{` stands for a
literal `{`, and the result is passed through `shorten_path`; without it the
path is returned unchanged apart from lower-casing. Unknown variables are
kept by name, and in expanded text characters that are unsafe in file names
(`< > : " | ? *` and control characters) are replaced by `$`.

`shorten_path` accepts `\` and `/` as separators, drops empty and `.`
segments, resolves `..`, and joins the result with `sep`, which defaults to
`innoparse.filename.PATH_SEP` (`\` on Windows, `/` elsewhere).

## Version

`innoparse.release.version_string()` returns the program name and version;
`innoparse.release.INNOSETUP_VERSIONS` names the range of Inno Setup
versions the data formats follow.

## What this package does not do

innoparse does not open installer executables: it does not locate the
setup loader table, read resources or version numbers from executables,
decompress or parse the setup headers, or extract any files. It provides no
command-line program. It offers the checksum, cipher and file-name pieces on
which such a tool can be built.