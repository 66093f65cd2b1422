from unittest import TestCase

from restful import Endpoint, Resource, InvalidPathSegment, is_resource


class EndpointTestCase(TestCase):
    def test_empty(self):
        self.assertEqual(0, len(Endpoint.empty()))
        self.assertEqual('', Endpoint.empty().render())

    def test_extend(self):
        root = Endpoint.empty()
        foo = root.extend('foo')
        foo_1 = foo.extend(1)

        self.assertEqual('foo/1', foo_1.render())
        self.assertEqual(('foo', Resource('1')), foo_1.segments)
        self.assertEqual('foo', str(foo))
        self.assertEqual(0, len(root))
        self.assertEqual(1, len(foo))

    def test_equality(self):
        self.assertEqual(Endpoint(['foo', 'bar']), Endpoint.empty().extend('foo').extend('bar'))
        self.assertEqual(hash(Endpoint(['foo'])), hash(Endpoint.empty().extend('foo')))
        self.assertNotEqual(Endpoint(['foo', '1']), Endpoint(['foo', Resource(1)]))
        self.assertNotEqual(Endpoint(['foo']), 'foo')

    def test_invalid_segment(self):
        for key in (None, True, object(), ('a', 'b')):
            with self.assertRaises(InvalidPathSegment):
                Endpoint.empty().extend(key)

    def test_invalid_segment_is_type_error(self):
        with self.assertRaises(TypeError):
            Endpoint.empty().extend(None)

    def test_repr(self):
        self.assertEqual("<Endpoint '/foo/bar'>", repr(Endpoint(['foo', 'bar'])))


class ResourceTestCase(TestCase):
    def test_resource(self):
        self.assertEqual('123', str(Resource(123)))
        self.assertEqual(Resource('123'), Resource(123))
        self.assertEqual({Resource('a')}, {Resource('a'), Resource('a')})
        self.assertEqual("<Resource '1'>", repr(Resource(1)))

    def test_is_resource(self):
        self.assertTrue(is_resource(Resource(1)))
        self.assertFalse(is_resource('1'))
        self.assertTrue(is_resource(Endpoint.empty().extend(1.5).segments[0]))
