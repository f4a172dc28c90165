"""Tests for wwn_decode.decoder — normalization, validation and field extraction."""

import unittest

NAA5 = "50:06:01:60:08:60:2c:04"
NAA6 = "60:06:01:60:3a:b0:2e:00:12:34:56:78:9a:bc:de:f0"
NAA1 = "10:00:00:00:c9:12:34:56"
NAA2 = "20:00:00:11:0d:ab:cd:ef"


class TestNormalize(unittest.TestCase):
    def test_strips_colons_and_lowercases(self):
        from wwn_decode.utils import normalize_wwn
        self.assertEqual(normalize_wwn("50:06:01:60:08:60:2C:04"), "5006016008602c04")

    def test_idempotent(self):
        from wwn_decode.utils import normalize_wwn
        once = normalize_wwn(NAA6)
        self.assertEqual(normalize_wwn(once), once)

    def test_colon_placement_irrelevant(self):
        from wwn_decode.utils import normalize_wwn
        self.assertEqual(normalize_wwn("50:01:43:80"),
                         normalize_wwn("5001 4380".replace(" ", "")))
        self.assertEqual(normalize_wwn("5:0014:380"), "50014380")

    def test_none(self):
        from wwn_decode.utils import normalize_wwn
        self.assertEqual(normalize_wwn(None), "")


class TestIsValid(unittest.TestCase):
    def test_64_bit(self):
        from wwn_decode.decoder import is_valid
        self.assertTrue(is_valid(NAA5))
        self.assertTrue(is_valid("5001438012345678"))

    def test_128_bit(self):
        from wwn_decode.decoder import is_valid
        self.assertTrue(is_valid(NAA6))

    def test_uppercase(self):
        from wwn_decode.decoder import is_valid
        self.assertTrue(is_valid("500143801234ABCD"))

    def test_wrong_length(self):
        from wwn_decode.decoder import is_valid
        self.assertFalse(is_valid("500143801234567"))
        self.assertFalse(is_valid("50014380123456789"))
        self.assertFalse(is_valid(""))

    def test_non_hex(self):
        from wwn_decode.decoder import is_valid
        self.assertFalse(is_valid("500143801234567g"))

    def test_trailing_newline_rejected(self):
        from wwn_decode.decoder import is_valid
        self.assertFalse(is_valid("5006016008602c0\n"))
        self.assertFalse(is_valid("5006016008602c04\n"))

    def test_other_separators_rejected(self):
        from wwn_decode.decoder import is_valid
        self.assertFalse(is_valid("50-06-01-60-08-60-2c-04"))

    def test_none_does_not_raise(self):
        from wwn_decode.decoder import is_valid
        self.assertFalse(is_valid(None))


class TestNaa(unittest.TestCase):
    def test_supported_codes(self):
        from wwn_decode.decoder import naa
        self.assertEqual(naa(NAA1), "1")
        self.assertEqual(naa(NAA2), "2")
        self.assertEqual(naa(NAA5), "5")
        self.assertEqual(naa(NAA6), "6")

    def test_unsupported_code(self):
        from wwn_decode.decoder import naa
        self.assertIsNone(naa("3006016008602c04"))
        self.assertIsNone(naa("c006016008602c04"))

    def test_short_input(self):
        from wwn_decode.decoder import naa
        self.assertIsNone(naa("5006"))
        self.assertIsNone(naa(""))

    def test_naa6_needs_128_bits(self):
        from wwn_decode.decoder import naa
        self.assertIsNone(naa("6006016008602c04"))

    def test_garbled(self):
        from wwn_decode.decoder import naa
        self.assertIsNone(naa("5zz6016008602c04"))

    def test_trailing_newline(self):
        from wwn_decode.decoder import naa, oui
        self.assertIsNone(naa("5006016008602c0\n"))
        self.assertIsNone(oui("5006016008602c0\n"))


class TestFieldExtraction(unittest.TestCase):
    def test_oui_naa1_offset(self):
        from wwn_decode.decoder import oui
        self.assertEqual(oui("1" + "0" * 3 + "aabbcc" + "0123456789ab"), "aabbcc")

    def test_oui_naa1_emulex(self):
        from wwn_decode.decoder import oui
        self.assertEqual(oui(NAA1), "0000c9")

    def test_oui_naa2(self):
        from wwn_decode.decoder import oui
        self.assertEqual(oui(NAA2), "00110d")

    def test_oui_naa5(self):
        from wwn_decode.decoder import oui
        self.assertEqual(oui(NAA5), "006016")

    def test_oui_naa6(self):
        from wwn_decode.decoder import oui
        self.assertEqual(oui(NAA6), "006016")

    def test_vendor_sequence(self):
        from wwn_decode.decoder import vendor_sequence
        self.assertEqual(vendor_sequence(NAA1), "123456")
        self.assertEqual(vendor_sequence(NAA5), "008602c04")
        self.assertEqual(vendor_sequence(NAA6), "03ab02e00")

    def test_extension_only_for_naa6(self):
        from wwn_decode.decoder import vendor_specific_extension
        self.assertEqual(vendor_specific_extension(NAA6), "123456789abcdef0")
        self.assertIsNone(vendor_specific_extension(NAA1))
        self.assertIsNone(vendor_specific_extension(NAA2))
        self.assertIsNone(vendor_specific_extension(NAA5))

    def test_unrecognized_naa_yields_none(self):
        from wwn_decode.decoder import oui, vendor_sequence, vendor_specific_extension
        bad = "7006016008602c04"
        self.assertIsNone(oui(bad))
        self.assertIsNone(vendor_sequence(bad))
        self.assertIsNone(vendor_specific_extension(bad))

    def test_short_input_yields_none(self):
        from wwn_decode.decoder import oui, vendor_sequence
        self.assertIsNone(oui("10"))
        self.assertIsNone(vendor_sequence("50:06"))


class TestDecode(unittest.TestCase):
    def test_naa5(self):
        from wwn_decode.decoder import decode
        fields = decode(NAA5)
        self.assertEqual(fields.wwn, "5006016008602c04")
        self.assertEqual(fields.naa, "5")
        self.assertEqual(fields.oui, "006016")
        self.assertIsNone(fields.vendor_specific_extension)

    def test_naa6(self):
        from wwn_decode.decoder import decode
        fields = decode(NAA6)
        self.assertEqual(fields.vendor_specific_extension, "123456789abcdef0")

    def test_unknown(self):
        from wwn_decode.decoder import decode
        self.assertIsNone(decode("not a wwn"))


if __name__ == "__main__":
    unittest.main()
