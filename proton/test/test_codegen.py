import json
import unittest
from .. import transpile
from ..compile.analyse import analyse
from ..compile.buffer import Buffer
from ..compile.codegen import CodegenVisitor, camel_case, generate
from ..compile.ast import (
    Call, Data, Export, File, Function, Identifier, Import, Literal, Match,
    MatchExpr, Type, TypeInstance)
from ..compile.error import UndefinedIdentifierError

OPTION = '''\
function Option(type,a) {
  this.type = type;
  this.a = a;
}
'''

GET_OR = '''\
function getOr(opt, b) {
  switch (opt.type) {
    case 0:
      return b;
    case 1:
      return opt.a;
  }
}
'''

SOURCE = '''\
type Option
\tNone
\t( Some a )

fn get-or ( opt b ) match opt
\tNone -> b
\t( Some a ) -> a
'''


def option_type():
    return Type(id=Identifier(id='Option'), types=[
        TypeInstance(id=Identifier(id='None'), values=[]),
        TypeInstance(id=Identifier(id='Some'), values=[Identifier(id='a')]),
    ])


class CamelCaseTest(unittest.TestCase):

    def test_camel_case(self):
        self.assertEqual(camel_case('get-or'), 'getOr')
        self.assertEqual(camel_case('a-long-name'), 'aLongName')
        self.assertEqual(camel_case('plain'), 'plain')


class GenerateTest(unittest.TestCase):

    def test_option(self):
        a = Identifier(id='a')
        b = Identifier(id='b')
        opt = Identifier(id='opt')
        node = File(body=[
            option_type(),
            Function(id=Identifier(id='get-or'), args=[opt, b], body=Match(id=opt, expressions=[
                MatchExpr(typeinstance=TypeInstance(id=Identifier(id='None'), values=[]), expression=b),
                MatchExpr(typeinstance=TypeInstance(id=Identifier(id='Some'), values=[a]), expression=a),
            ])),
        ])
        self.assertEqual(generate(node).code, OPTION + '\n' + GET_OR)

    def test_transpile(self):
        self.assertEqual(transpile(SOURCE).code, OPTION + '\n' + GET_OR)
        self.assertEqual(transpile(SOURCE, 'opt.ptn', loc=True).code, OPTION + '\n' + GET_OR)

    def test_call_in_arm(self):
        source = (
            'type Option ( None ( Some a ) )\n'
            'fn get-or ( opt b ) match opt\n'
            '  None -> f b\n'
            '  ( Some a ) -> a\n'
            'fn f ( x ) x\n')
        self.assertEqual(transpile(source, 'x.ptn', loc=True).code, OPTION + '''
function getOr(opt, b) {
  switch (opt.type) {
    case 0:
      return f(b);
    case 1:
      return opt.a;
  }
}
function f(x) {
  return x;
}
''')

    def test_incomplete_match(self):
        source = 'type Option ( None ( Some a ) )\nfn f ( opt ) match opt\n\t( Some a ) -> a\n'
        self.assertEqual(transpile(source).code, OPTION + '''
function f(opt) {
  switch (opt.type) {
    case 1:
      return opt.a;
    default: throw new Error('No match!');
  }
}
''')

    def test_match_outside_return(self):
        b = Identifier(id='b')
        node = Match(id=b, expressions=[
            MatchExpr(
                typeinstance=TypeInstance(id=Identifier(id='Some'), values=[Identifier(id='a')]),
                expression=Identifier(id='a')),
        ])
        fn = Function(id=Identifier(id='f'), args=[b], body=node)
        analyse(File(body=[option_type(), fn]))

        buffer = Buffer()
        CodegenVisitor().visit(node, buffer, fn.scope)
        self.assertEqual(
            buffer.code(),
            "switch (b.type) {\n"
            "  case 1:\n"
            "    b.a;break;\n"
            "  default: throw new Error('No match!');\n"
            "}")

    def test_nested_match(self):
        source = (
            'type Option ( None ( Some a ) )\n'
            'fn f ( x ) match x\n'
            '\tNone -> x\n'
            '\t( Some y ) -> match y\n'
            '\t\tNone -> x\n'
            '\t\t( Some z ) -> z\n')
        self.assertIn('switch (x.a.type) {', transpile(source).code)
        self.assertIn('return x.a.a;', transpile(source).code)

    def test_call(self):
        source = 'fn id ( x ) x\nfn f ( y ) id y\nfn g ( ) id g "say \\u00e9"'
        self.assertEqual(transpile(source).code, (
            'function id(x) {\n  return x;\n}\n'
            'function f(y) {\n  return id(y);\n}\n'
            'function g() {\n  return id(g, "say \\\\u00e9");\n}\n'))

    def test_zero_argument_call(self):
        f = Identifier(id='f')
        node = File(body=[Function(id=f, args=[], body=Call(id=f, args=[]))])
        self.assertEqual(generate(node).code, 'function f() {\n  return f();\n}\n')

    def test_literal(self):
        self.assertEqual(
            transpile('fn f ( ) `it\'s "é"`').code,
            'function f() {\n  return "it\'s \\"é\\"";\n}\n')

    def test_import(self):
        self.assertEqual(
            transpile('import "./lib" ( to-string show )\nfn f ( x ) to-string x').code,
            'import { toString, show } from "./lib";\n'
            'function f(x) {\n  return toString(x);\n}\n')

    def test_data_and_export_are_skipped(self):
        a = Identifier(id='a')
        node = File(body=[
            Data(id=Identifier(id='Point'), fields=[Identifier(id='x')]),
            Function(id=a, args=[], body=a),
            Export(names=[a]),
        ])
        self.assertEqual(generate(node).code, 'function a() {\n  return a;\n}\n')

    def test_parameter_shadows_field(self):
        source = 'type Option ( None ( Some a ) )\nfn f ( a b ) match b\n\tNone -> a\n\t( Some a ) -> a\n'
        code = transpile(source).code
        self.assertIn('case 0:\n      return a;', code)
        self.assertIn('case 1:\n      return b.a;', code)

    def test_analysis_errors(self):
        with self.assertRaises(UndefinedIdentifierError) as cm:
            transpile('fn f ( x ) y', 'f.ptn', loc=True)
        self.assertEqual(cm.exception.pos.range, (11, 12))

    def test_unknown_node(self):
        with self.assertRaises(TypeError):
            CodegenVisitor().visit(object(), Buffer(), None)


class SourceMapTest(unittest.TestCase):

    def test_map(self):
        output = transpile('fn id ( x ) x', 'id.ptn', loc=True)
        self.assertEqual(output.code, 'function id(x) {\n  return x;\n}\n')
        self.assertEqual(json.loads(output.map), {
            'version': 3,
            'sources': ['id.ptn'],
            'names': ['id', 'x'],
            'mappings': 'AAAA,SAAGA,EAAH,CAAQC,CAAR;EAAYA,SAAZ',
        })

    def test_no_locations(self):
        output = transpile('fn id ( x ) x', 'id.ptn')
        self.assertEqual(json.loads(output.map)['mappings'], '')
