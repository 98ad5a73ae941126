#!/usr/bin/env python3
#
# decryption of password protected OOXML documents (agile encryption)
#
# takes the raw bytes of an encrypted OLE compound document and gives back
# the decrypted office package (a zip archive)
#

import asyncio
import base64
import binascii
import collections
import enum
import getpass
import hashlib
import io
import logging
import struct
import sys

import olefile
from olefile.olefile import NotOleFileError

from struct import unpack, pack
from xml.dom.minidom import parseString
from xml.parsers.expat import ExpatError

from Crypto.Cipher import AES

__version__ = '1.0.0'

# magic bytes that should be at the beginning of every OLE file
OLE_MAGIC = b'\xD0\xCF\x11\xE0\xA1\xB1\x1A\xE1'

ENCRYPTION_INFO_STREAM = 'EncryptionInfo'
ENCRYPTED_PACKAGE_STREAM = 'EncryptedPackage'

ENCRYPTION_TYPE_AGILE = 'agile'
ENCRYPTION_TYPE_UNSUPPORTED = 'unsupported'

AGILE_VERSION = (4, 4)
AGILE_XML_OFFSET = 8

AGILE_ALGORITHM_AES = 'AES'
AGILE_CHAINING_MODE_CBC = 'ChainingModeCBC'
AGILE_KEY_BITS = (128, 192, 256)

PASSWORD_KEY_ENCRYPTOR_NAMESPACE = 'http://schemas.microsoft.com/office/2006/keyEncryptor/password'

MAX_SPIN_COUNT = 10000000
SEGMENT_LENGTH = 4096

BLOCK_KEY_ENCRYPTED_KEY = b'\x14\x6e\x0b\xe7\xab\xac\xd0\xd6'
BLOCK_KEY_VERIFIER_HASH_INPUT = b'\xfe\xa7\xd2\x76\x3b\x4b\x9e\x79'
BLOCK_KEY_VERIFIER_HASH_VALUE = b'\xd7\xaa\x0f\x6d\x30\x61\x34\x4e'

# https://isc.sans.edu/diary/rss/23774
DEFAULT_PASSWORD = 'VelvetSweatshop'

# zip "end of central directory" record
END_ARCHIVE_STRUCT = '<4s4H2LH'
END_ARCHIVE_SIGNATURE = b'PK\x05\x06'
END_ARCHIVE_SIZE = struct.calcsize(END_ARCHIVE_STRUCT)
END_ARCHIVE_COMMENT_SIZE = 7
MAX_COMMENT_LENGTH = 1 << 16

HASH_ALGORITHMS = {
    'SHA512': hashlib.sha512,
    'SHA384': hashlib.sha384,
    'SHA256': hashlib.sha256,
    'SHA-1': hashlib.sha1,
    'SHA1': hashlib.sha1,
    'MD5': hashlib.md5,
}

#
# errors
#

class ErrorKind(enum.Enum):
    INVALID_CONTAINER = 'invalid_container'
    UNSUPPORTED_ENCRYPTION = 'unsupported_encryption'
    INVALID_DECRYPTED_FILE = 'invalid_decrypted_file'

class DecryptionError(Exception):
    """Base class of the errors reported to callers of decrypt_office_file."""
    kind = None

class InvalidContainer(DecryptionError):
    kind = ErrorKind.INVALID_CONTAINER

class UnsupportedEncryption(DecryptionError):
    kind = ErrorKind.UNSUPPORTED_ENCRYPTION

class InvalidDecryptedFile(DecryptionError):
    kind = ErrorKind.INVALID_DECRYPTED_FILE

class ContainerDefect(enum.Enum):
    NOT_A_CONTAINER = 'not_a_container'
    CORRUPT = 'corrupt'
    MISSING_STREAM = 'missing_stream'
    NOT_A_STREAM = 'not_a_stream'

class ContainerError(Exception):
    """Raised by the container driver. The defect attribute says what is wrong."""
    def __init__(self, defect, message):
        super().__init__(message)
        self.defect = defect

class ParsingError(Exception):
    pass

class CipherError(Exception):
    pass

class UnsupportedAlgorithm(CipherError):
    pass

class PasswordVerificationError(CipherError):
    pass

#
# format sniffing
#

EndOfCentralDirectory = collections.namedtuple('EndOfCentralDirectory', [
    'found',
    'record_offset',
    'comment_offset',
    'comment',
    'disk_number',
    'central_directory_disk',
    'disk_entries',
    'total_entries',
    'central_directory_size',
    'central_directory_offset'])

END_OF_CENTRAL_DIRECTORY_NOT_FOUND = EndOfCentralDirectory(False, *([None] * 9))

def is_container(data):
    """Returns True if data starts with the OLE compound document signature."""
    return bytes(data[:len(OLE_MAGIC)]) == OLE_MAGIC

def _end_of_central_directory(data, record_offset):
    (signature, disk_number, central_directory_disk, disk_entries, total_entries,
     central_directory_size, central_directory_offset, comment_length) = \
        unpack(END_ARCHIVE_STRUCT, data[record_offset:record_offset + END_ARCHIVE_SIZE])

    comment_offset = record_offset + END_ARCHIVE_SIZE
    return EndOfCentralDirectory(
        True,
        record_offset,
        comment_offset,
        bytes(data[comment_offset:comment_offset + comment_length]),
        disk_number,
        central_directory_disk,
        disk_entries,
        total_entries,
        central_directory_size,
        central_directory_offset)

def find_end_of_central_directory(data):
    """Locates the "end of central directory" record that terminates a zip archive.

    The record may be followed by a comment of up to 65535 bytes, so the
    signature is searched backwards within the last 64k + 22 bytes of the
    data. Comment data can contain the signature bytes as well, candidates
    are therefore checked from the rightmost one down and the first one whose
    declared comment fits in the remaining data wins."""
    data = memoryview(data).cast('B')
    file_size = len(data)
    if file_size < END_ARCHIVE_SIZE:
        return END_OF_CENTRAL_DIRECTORY_NOT_FOUND

    # the common case: no archive comment at all
    record_offset = file_size - END_ARCHIVE_SIZE
    if data[record_offset:record_offset + 4] == END_ARCHIVE_SIGNATURE and \
       data[file_size - 2:file_size] == b'\x00\x00':
        return _end_of_central_directory(data, record_offset)

    window_start = max(0, file_size - MAX_COMMENT_LENGTH - END_ARCHIVE_SIZE)
    window = bytes(data[window_start:file_size])
    end = len(window) - END_ARCHIVE_SIZE + len(END_ARCHIVE_SIGNATURE)
    while end > 0:
        start = window.rfind(END_ARCHIVE_SIGNATURE, 0, end)
        if start < 0:
            break

        record_offset = window_start + start
        endrec = unpack(END_ARCHIVE_STRUCT, data[record_offset:record_offset + END_ARCHIVE_SIZE])
        comment_length = endrec[END_ARCHIVE_COMMENT_SIZE]
        if file_size - record_offset >= END_ARCHIVE_SIZE + comment_length:
            return _end_of_central_directory(data, record_offset)

        logging.debug("rejecting end of central directory candidate at {} (comment of {} bytes does not fit)".format(
                      record_offset, comment_length))
        end = start + len(END_ARCHIVE_SIGNATURE) - 1

    return END_OF_CENTRAL_DIRECTORY_NOT_FOUND

def is_archive(data):
    """Returns True if data ends with a valid zip "end of central directory" record."""
    return find_end_of_central_directory(data).found

#
# encryption descriptor (the EncryptionInfo stream)
#

AgileEncryptionInfo = collections.namedtuple('AgileEncryptionInfo', [
    'key_data_salt',
    'key_data_hash_algorithm',
    'password_salt',
    'password_hash_algorithm',
    'password_key_bits',
    'spin_count',
    'encrypted_key_value',
    'encrypted_verifier_hash_input',
    'encrypted_verifier_hash_value',
    'cipher_algorithm',
    'cipher_chaining',
    'block_size'])

def read_version(descriptor):
    """Returns the (major, minor) version pair of an EncryptionInfo stream, or None if it is too short."""
    if len(descriptor) < 4:
        return None

    return unpack('<HH', descriptor[:4])

def resolve_scheme(descriptor):
    """Returns ENCRYPTION_TYPE_AGILE for version 4.4 descriptors, ENCRYPTION_TYPE_UNSUPPORTED otherwise."""
    if read_version(descriptor) == AGILE_VERSION:
        return ENCRYPTION_TYPE_AGILE

    return ENCRYPTION_TYPE_UNSUPPORTED

def describe_version(descriptor):
    version = read_version(descriptor)
    if version is None:
        return "truncated encryption info ({} bytes)".format(len(descriptor))

    major, minor = version
    if version == AGILE_VERSION:
        name = "agile encryption"
    elif major in (2, 3, 4) and minor == 2:
        name = "standard encryption"
    elif major in (3, 4) and minor == 3:
        name = "extensible encryption"
    else:
        name = "unknown encryption"

    return "{} (version {}.{})".format(name, major, minor)

def _first_element(elements, name):
    if not elements:
        raise ParsingError("missing {} element".format(name))

    return elements[0]

def _attribute(element, name):
    if not element.hasAttribute(name):
        raise ParsingError("missing {} attribute on {}".format(name, element.tagName))

    return element.getAttribute(name)

def _int_attribute(element, name):
    value = _attribute(element, name)
    try:
        return int(value)
    except ValueError:
        raise ParsingError("invalid {} value {!r}".format(name, value))

def _base64_attribute(element, name):
    value = _attribute(element, name)
    try:
        return base64.b64decode(value, validate=True)
    except binascii.Error:
        raise ParsingError("invalid base64 in {} attribute".format(name))

def _salt_attribute(element):
    # the password salt doubles as the AES IV
    salt = _base64_attribute(element, 'saltValue')
    if len(salt) < AES.block_size:
        raise ParsingError("invalid saltValue length {} on {}".format(len(salt), element.tagName))

    return salt

def _hash_algorithm(element):
    name = _attribute(element, 'hashAlgorithm')
    if name not in HASH_ALGORITHMS:
        raise ParsingError("unsupported hash algorithm {}".format(name))

    return name

def parse_agile_parameters(descriptor):
    """Parses the XML of an agile EncryptionInfo stream into an AgileEncryptionInfo."""
    if resolve_scheme(descriptor) != ENCRYPTION_TYPE_AGILE:
        raise ParsingError("not an agile encryption descriptor: {}".format(describe_version(descriptor)))

    try:
        xml = parseString(bytes(descriptor[AGILE_XML_OFFSET:]).rstrip(b'\x00'))
    except (ExpatError, LookupError, UnicodeError) as e:
        raise ParsingError("invalid encryption descriptor xml: {}".format(e))

    key_data = _first_element(xml.getElementsByTagName('keyData'), 'keyData')
    key_data_salt = _salt_attribute(key_data)
    key_data_hash_algorithm = _hash_algorithm(key_data)

    encrypted_key = _first_element(
        xml.getElementsByTagNameNS(PASSWORD_KEY_ENCRYPTOR_NAMESPACE, 'encryptedKey'), 'encryptedKey')

    cipher_algorithm = _attribute(encrypted_key, 'cipherAlgorithm')
    cipher_chaining = _attribute(encrypted_key, 'cipherChaining')
    if cipher_algorithm != AGILE_ALGORITHM_AES or cipher_chaining != AGILE_CHAINING_MODE_CBC:
        raise ParsingError("agile cipher {} chaining mode {} not supported".format(cipher_algorithm, cipher_chaining))

    block_size = _int_attribute(encrypted_key, 'blockSize')
    if block_size != AES.block_size:
        raise ParsingError("invalid block size {}".format(block_size))

    password_key_bits = _int_attribute(encrypted_key, 'keyBits')
    if password_key_bits not in AGILE_KEY_BITS:
        raise ParsingError("invalid key size {}".format(password_key_bits))

    spin_count = _int_attribute(encrypted_key, 'spinCount')
    if not 0 <= spin_count <= MAX_SPIN_COUNT:
        raise ParsingError("spin count {} out of range".format(spin_count))

    return AgileEncryptionInfo(
        key_data_salt,
        key_data_hash_algorithm,
        _salt_attribute(encrypted_key),
        _hash_algorithm(encrypted_key),
        password_key_bits,
        spin_count,
        _base64_attribute(encrypted_key, 'encryptedKeyValue'),
        _base64_attribute(encrypted_key, 'encryptedVerifierHashInput'),
        _base64_attribute(encrypted_key, 'encryptedVerifierHashValue'),
        cipher_algorithm,
        cipher_chaining,
        block_size)

#
# container driver
#

class OleContainer(object):
    """Read-only access to the streams of an OLE compound document."""
    def __init__(self, ole):
        self.ole = ole

    @classmethod
    def open(cls, data):
        # olefile only logs most structural defects by default
        try:
            ole = olefile.OleFileIO(io.BytesIO(data), raise_defects=olefile.DEFECT_INCORRECT)
        except NotOleFileError as e:
            raise ContainerError(ContainerDefect.NOT_A_CONTAINER, str(e)) from e
        except (OSError, IndexError, ValueError, struct.error) as e:
            raise ContainerError(ContainerDefect.CORRUPT, "invalid compound document: {}".format(e)) from e

        return cls(ole)

    def read_stream(self, name):
        if not self.ole.exists(name):
            raise ContainerError(ContainerDefect.MISSING_STREAM, "stream {} not found".format(name))

        if self.ole.get_type(name) != olefile.STGTY_STREAM:
            raise ContainerError(ContainerDefect.NOT_A_STREAM, "{} is not a stream".format(name))

        try:
            return self.ole.openstream(name).read()
        except (OSError, IndexError, ValueError, struct.error) as e:
            raise ContainerError(ContainerDefect.CORRUPT, "unable to read stream {}: {}".format(name, e)) from e

    def close(self):
        self.ole.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

#
# key derivation and decryption
#

def hashCalc(i, algorithm):
    try:
        return HASH_ALGORITHMS[algorithm](i)
    except KeyError:
        raise UnsupportedAlgorithm("unsupported hash algorithm {}".format(algorithm))

class AgileCipher(object):
    """Agile (ECMA-376) password key derivation and package decryption with AES-CBC."""

    def hash_password(self, password, salt, algorithm, spin_count):
        # Initial round hash(salt + password)
        h = hashCalc(salt + password.encode('UTF-16LE'), algorithm)

        # Iteration of 0 -> spincount-1; hash = hash(iterator + hash)
        for i in range(0, spin_count, 1):
            h = hashCalc(pack('<I', i) + h.digest(), algorithm)

        return h.digest()

    def block_key(self, password_hash, block_key, algorithm, key_bits):
        """Returns the key for one purpose (block key) truncated or padded with 0x36 to key_bits."""
        key_length = key_bits // 8
        key = hashCalc(password_hash + block_key, algorithm).digest()[:key_length]
        return key.ljust(key_length, b'\x36')

    def _decrypt_cbc(self, key, iv, data):
        try:
            return AES.new(key, AES.MODE_CBC, iv).decrypt(data)
        except ValueError as e:
            raise CipherError("AES decryption failed: {}".format(e)) from e

    def derive_key(self, password, password_salt, password_hash_algorithm, encrypted_key_value, spin_count,
                   key_bits, encrypted_verifier_hash_input=None, encrypted_verifier_hash_value=None,
                   verifier_hash_algorithm=None):
        """Returns the secret key of the document protected by the given password.

        When the encrypted verifier is given the password is checked first and
        PasswordVerificationError is raised if it does not match."""
        password_hash = self.hash_password(password, password_salt, password_hash_algorithm, spin_count)

        if encrypted_verifier_hash_input is not None and encrypted_verifier_hash_value is not None:
            self.verify(password_hash, password_salt, password_hash_algorithm, key_bits,
                        encrypted_verifier_hash_input, encrypted_verifier_hash_value,
                        verifier_hash_algorithm or password_hash_algorithm)

        key = self.block_key(password_hash, BLOCK_KEY_ENCRYPTED_KEY, password_hash_algorithm, key_bits)
        secret_key = self._decrypt_cbc(key, password_salt[:AES.block_size], encrypted_key_value)
        return secret_key[:key_bits // 8]

    def verify(self, password_hash, password_salt, password_hash_algorithm, key_bits,
               encrypted_verifier_hash_input, encrypted_verifier_hash_value, verifier_hash_algorithm):
        iv = password_salt[:AES.block_size]

        key = self.block_key(password_hash, BLOCK_KEY_VERIFIER_HASH_INPUT, password_hash_algorithm, key_bits)
        verifier_hash_input = self._decrypt_cbc(key, iv, encrypted_verifier_hash_input)
        # the verifier input is exactly one salt long, the rest is padding
        verifier_hash_input = verifier_hash_input[:len(password_salt)]

        key = self.block_key(password_hash, BLOCK_KEY_VERIFIER_HASH_VALUE, password_hash_algorithm, key_bits)
        verifier_hash_value = self._decrypt_cbc(key, iv, encrypted_verifier_hash_value)

        computed_hash = hashCalc(verifier_hash_input, verifier_hash_algorithm).digest()
        if computed_hash != verifier_hash_value[:len(computed_hash)]:
            raise PasswordVerificationError("password verifier mismatch")

    def decrypt(self, key, key_data_salt, key_data_hash_algorithm, payload):
        """Decrypts the EncryptedPackage stream and returns the package bytes."""
        if len(payload) < 8:
            raise CipherError("encrypted package too short ({} bytes)".format(len(payload)))

        total_size, = unpack('<Q', payload[:8])
        logging.debug("decrypting package of {} bytes".format(total_size))

        output = []
        for i, offset in enumerate(range(8, len(payload), SEGMENT_LENGTH)):
            saltWithBlockKey = key_data_salt + pack('<I', i)
            iv = hashCalc(saltWithBlockKey, key_data_hash_algorithm).digest()[:AES.block_size]
            output.append(self._decrypt_cbc(key, iv, payload[offset:offset + SEGMENT_LENGTH]))

        output = b''.join(output)
        if total_size > len(output):
            raise CipherError("declared package size {} exceeds decrypted data ({} bytes)".format(
                              total_size, len(output)))

        return output[:total_size]

#
# decryption pipeline
#

class State(enum.Enum):
    START = 'start'
    CONTAINER_VALIDATED = 'container_validated'
    DESCRIPTOR_READ = 'descriptor_read'
    SCHEME_RESOLVED = 'scheme_resolved'
    PARAMETERS_PARSED = 'parameters_parsed'
    PASSWORD_ACQUIRED = 'password_acquired'
    KEY_DERIVED = 'key_derived'
    PAYLOAD_DECRYPTED = 'payload_decrypted'
    RESULT_VALIDATED = 'result_validated'
    FAILED = 'failed'

class OfficeFileDecryptor(object):
    """Decrypts one agile encrypted office document.

    An instance serves exactly one decryption attempt: the password provider
    (a coroutine function returning the password) is awaited at most once
    and a wrong password is a terminal InvalidDecryptedFile error. Retrying
    means creating a new instance."""

    def __init__(self, data, password_provider, container_driver=OleContainer, cipher=None):
        self.data = data
        self.password_provider = password_provider
        self.container_driver = container_driver
        self.cipher = cipher if cipher is not None else AgileCipher()

        self.state = State.START
        self.failure = None
        self.encryption_type = None
        self.encryption_info = None

    def _transition(self, state):
        logging.debug("decryption state {} -> {}".format(self.state.value, state.value))
        self.state = state

    async def decrypt(self):
        """Runs the attempt and returns the decrypted package bytes."""
        if self.state != State.START:
            raise RuntimeError("decryptor already used, create a new one to retry")

        try:
            result = await self._decrypt()
        except DecryptionError as e:
            self.failure = e.kind
            logging.warning("decryption failed ({}): {}".format(e.kind.value, e))
            raise
        finally:
            if self.state != State.RESULT_VALIDATED:
                self.state = State.FAILED

        return result

    async def _decrypt(self):
        if not is_container(self.data):
            raise InvalidContainer("not an OLE compound document")

        try:
            container = self.container_driver.open(self.data)
        except ContainerError as e:
            raise InvalidContainer(str(e)) from e

        with container:
            self._transition(State.CONTAINER_VALIDATED)

            descriptor = self._read_stream(container, ENCRYPTION_INFO_STREAM)
            self._transition(State.DESCRIPTOR_READ)

            self.encryption_type = resolve_scheme(descriptor)
            if self.encryption_type != ENCRYPTION_TYPE_AGILE:
                raise UnsupportedEncryption("{} is not supported".format(describe_version(descriptor)))

            self._transition(State.SCHEME_RESOLVED)

            # read before asking for a password so that a broken container never prompts
            payload = self._read_stream(container, ENCRYPTED_PACKAGE_STREAM)

        try:
            self.encryption_info = parse_agile_parameters(descriptor)
        except ParsingError as e:
            raise UnsupportedEncryption("invalid agile encryption info: {}".format(e)) from e

        self._transition(State.PARAMETERS_PARSED)

        password = await self.password_provider()
        if not isinstance(password, str):
            raise TypeError("password provider returned {} instead of str".format(type(password).__name__))

        self._transition(State.PASSWORD_ACQUIRED)

        info = self.encryption_info
        key = await self._run_cipher(
            self.cipher.derive_key,
            password,
            info.password_salt,
            info.password_hash_algorithm,
            info.encrypted_key_value,
            info.spin_count,
            info.password_key_bits,
            encrypted_verifier_hash_input=info.encrypted_verifier_hash_input,
            encrypted_verifier_hash_value=info.encrypted_verifier_hash_value)
        self._transition(State.KEY_DERIVED)

        decrypted = await self._run_cipher(
            self.cipher.decrypt, key, info.key_data_salt, info.key_data_hash_algorithm, payload)
        self._transition(State.PAYLOAD_DECRYPTED)

        # a wrong key decrypts to garbage, a right one to a zip archive
        if not is_archive(decrypted):
            raise InvalidDecryptedFile("decrypted data is not a valid package (wrong password?)")

        self._transition(State.RESULT_VALIDATED)
        return decrypted

    def _read_stream(self, container, name):
        try:
            data = container.read_stream(name)
        except ContainerError as e:
            raise InvalidContainer(str(e)) from e

        logging.debug("read {} bytes from stream {}".format(len(data), name))
        return data

    async def _run_cipher(self, function, *args, **kwargs):
        try:
            return await asyncio.to_thread(function, *args, **kwargs)
        except ContainerError as e:
            raise InvalidContainer(str(e)) from e
        except CipherError as e:
            raise InvalidDecryptedFile(str(e)) from e

async def decrypt_office_file(data, password_provider):
    """Decrypts an agile encrypted office document.

    data is the raw OLE container, password_provider a coroutine function
    returning the password. Raises InvalidContainer, UnsupportedEncryption or
    InvalidDecryptedFile; errors of the password provider pass through."""
    return await OfficeFileDecryptor(data, password_provider).decrypt()

#
# command line
#

def static_password(password):
    async def _provider():
        return password

    return _provider

async def prompt_password():
    return await asyncio.to_thread(getpass.getpass, "Password: ")

def main(argv=None):
    import argparse
    parser = argparse.ArgumentParser(description="Decrypt a password protected (agile encryption) office document.")
    parser.add_argument('-p', '--password',
        help="The password to use for decryption.")
    parser.add_argument('--empty-password', action='store_true', default=False,
        help="Use an empty password string as the password.")
    parser.add_argument('--no-default-password', action='store_true', default=False,
        help="Do not try the default password {} first.".format(DEFAULT_PASSWORD))
    parser.add_argument('--log-level', dest='log_level', default='WARNING',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help="The logging level to use (DEBUG, INFO, WARNING or ERROR).")
    parser.add_argument('office_file')
    parser.add_argument('output_file')
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level))

    with open(args.office_file, 'rb') as fp:
        data = fp.read()

    if not is_container(data):
        print("{} is not an OLE document".format(args.office_file))
        return 1

    def _save(decrypted):
        with open(args.output_file, 'wb') as fp:
            fp.write(decrypted)

    if not args.no_default_password:
        try:
            decrypted = asyncio.run(decrypt_office_file(data, static_password(DEFAULT_PASSWORD)))
        except InvalidDecryptedFile:
            logging.info("default password {} does not apply".format(DEFAULT_PASSWORD))
        except DecryptionError as e:
            print("ERROR: {}".format(e))
            return 1
        else:
            _save(decrypted)
            print("decrypted {} into {} using default password {}".format(
                  args.office_file, args.output_file, DEFAULT_PASSWORD))
            return 0

    if args.password is not None:
        provider = static_password(args.password)
    elif args.empty_password:
        provider = static_password('')
    else:
        provider = prompt_password

    try:
        decrypted = asyncio.run(decrypt_office_file(data, provider))
    except InvalidDecryptedFile:
        print("ERROR: invalid password")
        return 1
    except DecryptionError as e:
        print("ERROR: {}".format(e))
        return 1

    _save(decrypted)
    print("decrypted {} into {}".format(args.office_file, args.output_file))
    return 0

if __name__ == '__main__':
    sys.exit(main())
