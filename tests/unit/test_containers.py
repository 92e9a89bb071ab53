"""
Container Mapper Tests

Dict / List / Set / Tuple shapes and their namespace contributions.
"""

from codegraph_typeref import (
    BOOL,
    FLOAT,
    INT,
    STR,
    DictType,
    ListType,
    SetType,
    TargetProfile,
    TupleType,
    TypeReference,
    TypeReferenceTranslator,
)

GENERIC = "System.Collections.Generic"


class TestDict:
    def test_key_value_order(self, translator):
        """Dict{Str, Int} -> Dictionary<string, int>, key first"""
        ref, namespaces = translator.translate(DictType(STR, INT))
        assert ref.name == "Dictionary"
        assert ref.arguments == (TypeReference("string"), TypeReference("int"))
        assert namespaces == {GENERIC}

    def test_swapped_order(self, translator):
        ref, _ = translator.translate(DictType(INT, STR))
        assert [a.name for a in ref.arguments] == ["int", "string"]

    def test_nested_value_namespaces(self, translator):
        ref, namespaces = translator.translate(DictType(STR, TupleType((INT, FLOAT))))
        assert str(ref) == "Dictionary<string, Tuple<int, float>>"
        assert namespaces == {GENERIC, "System"}


class TestListAndSet:
    def test_list(self, translator):
        assert translator.translate(ListType(INT)) == (TypeReference.of("List", TypeReference("int")), {GENERIC})

    def test_set(self, translator):
        assert translator.translate(SetType(STR)) == (TypeReference.of("Set", TypeReference("string")), {GENERIC})

    def test_nested_list_single_namespace(self, translator):
        """Same namespace contributed twice appears once"""
        _, namespaces = translator.translate(ListType(ListType(ListType(INT))))
        assert namespaces == {GENERIC}

    def test_profile_names(self):
        profile = TargetProfile(set_name="HashSet", list_name="IList")
        translator = TypeReferenceTranslator({}, profile=profile)
        assert str(translator.translate(SetType(ListType(INT)))[0]) == "HashSet<IList<int>>"

    def test_namespace_free_container(self):
        """A container with no namespace keeps the "absent" state"""
        translator = TypeReferenceTranslator({}, profile=TargetProfile(list_namespace=None))
        assert translator.translate(ListType(INT)) == (TypeReference.of("List", TypeReference("int")), None)


class TestTuple:
    def test_positional_order(self, translator):
        ref, _ = translator.translate(TupleType((BOOL, STR, INT, FLOAT)))
        assert [a.name for a in ref.arguments] == ["bool", "string", "int", "float"]

    def test_scalar_tuple_namespace(self, translator):
        _, namespaces = translator.translate(TupleType((INT, BOOL)))
        assert namespaces == {"System"}

    def test_empty_tuple(self, translator):
        assert translator.translate(TupleType(())) == (TypeReference("Tuple"), {"System"})

    def test_namespace_union(self, translator, distinct_profile):
        """Tuple{Str, List{Int}} needs exactly the tuple and list namespaces"""
        data_type = TupleType((STR, ListType(INT)))

        _, namespaces = translator.translate(data_type)
        assert namespaces == {"System", GENERIC}

        _, namespaces = TypeReferenceTranslator({}, profile=distinct_profile).translate(data_type)
        assert namespaces == {"Collections.Tuple", "Collections.List"}

    def test_same_element_repeated(self, translator):
        """One value in several positions is translated at each position"""
        ref, _ = translator.translate(TupleType((INT, INT, INT)))
        assert str(ref) == "Tuple<int, int, int>"

    def test_same_dict_twice_in_one_call(self, translator):
        """A shared dictionary subgraph is not short-circuited on its second use"""
        shared = DictType(STR, INT)
        ref, namespaces = translator.translate(TupleType((shared, ListType(shared))))
        assert str(ref) == "Tuple<Dictionary<string, int>, List<Dictionary<string, int>>>"
        assert namespaces == {"System", GENERIC}

    def test_same_dict_as_key_and_value(self, translator):
        shared = DictType(STR, INT)
        ref, _ = translator.translate(DictType(shared, shared))
        assert str(ref) == "Dictionary<Dictionary<string, int>, Dictionary<string, int>>"
