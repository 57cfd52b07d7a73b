import pytest

from spaceshooter.gameobj import GameObj


class Concrete(GameObj):
    def __init__(self):
        super().__init__()
        self.elapsed = 0.0
        self.drawn_on = []

    def init(self):
        return True

    def update(self, seconds):
        self.elapsed += seconds

    def draw(self, surface):
        self.drawn_on.append(surface)


class MissingDraw(GameObj):
    def init(self):
        return True

    def update(self, seconds):
        pass


def test_base_class_cannot_be_instantiated():
    with pytest.raises(TypeError):
        GameObj()


def test_incomplete_subclass_cannot_be_instantiated():
    with pytest.raises(TypeError):
        GameObj.__new__(MissingDraw)


def test_default_object_type():
    obj = GameObj.__new__(Concrete)
    GameObj.__init__(obj)
    assert obj.obj_type == -1


def test_object_type_can_be_changed_and_reset():
    obj = GameObj.__new__(Concrete)
    GameObj.__init__(obj)
    obj.obj_type = 7
    assert obj.obj_type == 7
    GameObj.__init__(obj)
    assert obj.obj_type == -1


def test_concrete_subclass_behaviour():
    obj = GameObj.__new__(Concrete)
    Concrete.__init__(obj)
    assert obj.obj_type == -1
    assert obj.init() is True
    obj.update(0.5)
    obj.update(0.25)
    obj.draw("screen")
    assert obj.elapsed == pytest.approx(0.75)
    assert obj.drawn_on == ["screen"]