# =============================================================================
# File: test_detector.py
# Date: 2026-10-12
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

from copywriter.modules.comment_styles import style_for
from copywriter.modules.detector import detect, detect_footer, names_author

PY = style_for(".py")
C = style_for(".c")
RS = style_for(".rs")
HTML = style_for(".html")


class TestDetectHeader:

    def test_no_comment_block(self):
        assert detect("x = 1\n", PY) is None

    def test_comment_without_copyright_is_not_a_header(self):
        assert detect("# helper module\nx = 1\n", PY) is None

    def test_single_year(self):
        content = "# Copyright (c) 2019 Ada Lovelace\n\nx = 1\n"
        match = detect(content, PY)
        assert match.year_start == 2019
        assert match.year_end is None
        assert match.latest_year == 2019
        assert match.holder == "Ada Lovelace"
        assert content[match.start:match.end] == "# Copyright (c) 2019 Ada Lovelace\n"
        assert content[match.years_start_pos:match.years_end_pos] == "2019"

    def test_year_range(self):
        content = "# Copyright (c) 2019-2021 Ada Lovelace\n\nx = 1\n"
        match = detect(content, PY)
        assert (match.year_start, match.year_end) == (2019, 2021)
        assert content[match.years_start_pos:match.years_end_pos] == "2019-2021"

    def test_copyright_without_year_is_ambiguous(self):
        match = detect("# Copyright Ada Lovelace\nx = 1\n", PY)
        assert match is not None
        assert not match.has_year

    def test_prefers_line_naming_author(self):
        content = "// Copyright (c) 2001 Someone Else\n// Copyright (c) 2019 Ada Lovelace\n\nfn main() {}\n"
        assert detect(content, RS).year_start == 2001
        match = detect(content, RS, author="Ada Lovelace")
        assert match.year_start == 2019
        assert match.holder == "Ada Lovelace"

    def test_symbol_and_uppercase_c(self):
        assert detect("// Copyright © 2018 Ada\n", RS).year_start == 2018
        assert detect("// COPYRIGHT (C) 2017 Ada\n", RS).year_start == 2017

    def test_multiline_block_comment(self):
        content = "/*\n * Copyright (C) 2020 Ada\n * All rights reserved.\n */\nint x;\n"
        match = detect(content, C)
        assert match.year_start == 2020
        assert match.holder == "Ada"
        assert content[match.start:match.end] == "/*\n * Copyright (C) 2020 Ada\n * All rights reserved.\n */"

    def test_single_line_block_holder_drops_closer(self):
        match = detect("/* Copyright (c) 2024 Ada Lovelace */\n\nint x;\n", C)
        assert match.holder == "Ada Lovelace"

    def test_unterminated_block_is_ignored(self):
        assert detect("/* Copyright 2020 Ada\nint x;\n", C) is None

    def test_block_must_start_the_content(self):
        assert detect("int x;\n/* Copyright (c) 2020 Ada */\n", C) is None

    def test_footer_at_top_is_not_a_header(self):
        content = "# License:\n# Copyright (c) 2020 Ada\n# MIT\n"
        assert detect(content, PY) is None

    def test_blank_lines_above_header_are_skipped(self):
        content = "\n\n# Copyright (c) 2019 Ada Lovelace\n\nx = 1\n"
        match = detect(content, PY)
        assert match.start == 2
        assert content[match.start:match.end] == "# Copyright (c) 2019 Ada Lovelace\n"
        assert content[match.years_start_pos:match.years_end_pos] == "2019"

    def test_blank_lines_above_block_header_are_skipped(self):
        content = " \n/* Copyright (c) 2019-2021 Ada */\nint x;\n"
        match = detect(content, C)
        assert content[match.years_start_pos:match.years_end_pos] == "2019-2021"
        assert content[match.start:match.end] == "/* Copyright (c) 2019-2021 Ada */"

    def test_preferred_line_needs_whole_author_name(self):
        content = "// Copyright (c) 2001 Adam Smith\n// Copyright (c) 2019 Ada\n"
        assert detect(content, RS, author="Ada").year_start == 2019


class TestNamesAuthor:

    def test_whole_words_only(self):
        assert names_author("Ada Lovelace", "Ada")
        assert names_author("ADA LOVELACE and others", "ada lovelace")
        assert names_author("Ada Lovelace.", "Ada Lovelace")
        assert not names_author("Adam Smith", "Ada")
        assert not names_author("Nevada Corp", "Ada")

    def test_empty_values(self):
        assert not names_author(None, "Ada")
        assert not names_author("Ada", "   ")

    def test_regex_characters_in_author(self):
        assert names_author("Acme (Labs) Inc.", "Acme (Labs)")
        assert not names_author("AcmeXLabs", "Acme.Labs")


class TestDetectFooter:

    def test_line_footer(self):
        content = "x = 1\n\n# License:\n# MIT\n"
        match = detect_footer(content, PY)
        assert match.start == content.index("# License:")
        assert match.end == len(content)
        assert match.text == "# License:\n# MIT"

    def test_trailing_comment_without_marker(self):
        assert detect_footer("x = 1\n# trailing note\n", PY) is None

    def test_footer_must_be_at_end(self):
        assert detect_footer("# License:\n# MIT\n\nx = 1\n", PY) is None

    def test_block_footer(self):
        content = "int x;\n\n/*\nLicense:\nMIT\n*/\n"
        match = detect_footer(content, C)
        assert match.text == "/*\nLicense:\nMIT\n*/"
        assert match.start == content.index("/*")

    def test_decorated_block_footer(self):
        content = "int x;\n\n/*\n * License:\n * MIT\n */\n"
        assert detect_footer(content, C) is not None

    def test_block_footer_not_at_end(self):
        assert detect_footer("/*\nLicense:\nMIT\n*/\nint x;\n", C) is None

    def test_trailing_block_without_marker(self):
        assert detect_footer("int x;\n\n/* end of file */\n", C) is None

    def test_markup_footer(self):
        content = "<p>hi</p>\n\n<!--\nLicense:\nMIT\n-->\n"
        assert detect_footer(content, HTML).text == "<!--\nLicense:\nMIT\n-->"

    def test_opener_inside_block_footer_text(self):
        content = "int x;\n\n/*\nLicense:\nuse /* sparingly\n*/\n"
        match = detect_footer(content, C)
        assert match.start == content.index("/*\nLicense:")
        assert match.text.endswith("use /* sparingly\n*/")

    def test_empty_content(self):
        assert detect_footer("", PY) is None
        assert detect_footer("\n\n", C) is None
