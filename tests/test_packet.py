from wifisim.packet import Packet


def test_defaults():
    packet = Packet()
    assert packet.size == 1024
    assert packet.creation_time == 0


def test_explicit_values():
    packet = Packet(size=512, creation_time=42)
    assert (packet.size, packet.creation_time) == (512, 42)


def test_fields_are_mutable():
    packet = Packet()
    packet.size = 200
    packet.creation_time = 17
    assert packet == Packet(200, 17)


def test_equality_depends_on_values():
    assert Packet(100, 1) == Packet(100, 1)
    assert Packet(100, 1) != Packet(100, 2)