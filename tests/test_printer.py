from prototool.format.printer import Printer


class TestPrinter:
    def test_nested_indent(self):
        p = Printer()
        p.p("x")
        p.in_()
        p.p("y")
        p.in_()
        p.p("z")
        p.out()
        p.out()
        p.p("")
        assert p.bytes() == b"x\n  y\n    z\n\n"

    def test_args_are_concatenated(self):
        p = Printer()
        p.p("int32 foo = ", 1, ";")
        assert p.bytes() == b"int32 foo = 1;\n"

    def test_whitespace_only_line_has_no_indent(self):
        p = Printer()
        p.in_()
        p.p("   ")
        p.p("\t")
        p.p()
        assert p.bytes() == b"\n\n\n"

    def test_custom_indent(self):
        p = Printer("\t")
        p.in_()
        p.p("a")
        assert p.indent_string == "\t"
        assert p.bytes() == b"\ta\n"

    def test_empty_indent_uses_two_spaces(self):
        assert Printer("").indent_string == "  "

    def test_out_clamps_at_zero(self):
        p = Printer()
        p.out()
        p.out()
        assert p.depth == 0
        p.in_()
        p.in_()
        p.out()
        p.out()
        p.out()
        p.in_()
        assert p.depth == 1
        p.p("a")
        assert p.bytes() == b"  a\n"

    def test_bytes_keeps_growing(self):
        p = Printer()
        p.p("a")
        first = p.bytes()
        p.p("b")
        assert first == b"a\n"
        assert p.bytes() == b"a\nb\n"
