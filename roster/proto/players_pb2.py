# -*- coding: utf-8 -*-
# Generated by the protocol buffer compiler.  DO NOT EDIT!
# source: roster/proto/players.proto
# Protobuf Python Version: 4.25.1
"""Generated protocol buffer code."""
from google.protobuf import descriptor as _descriptor
from google.protobuf import descriptor_pool as _descriptor_pool
from google.protobuf import symbol_database as _symbol_database
from google.protobuf.internal import builder as _builder
# @@protoc_insertion_point(imports)

_sym_db = _symbol_database.Default()




DESCRIPTOR = _descriptor_pool.Default().AddSerializedFile(b'\n\x1aroster/proto/players.proto\x12\x06roster\"\x96\x01\n\x06Player\x12\n\n\x02id\x18\x01 \x01(\x05\x12\x0c\n\x04name\x18\x02 \x01(\t\x12\x0e\n\x06number\x18\x03 \x01(\t\x12\x10\n\x08position\x18\x04 \x01(\t\x12\x0e\n\x06height\x18\x05 \x01(\t\x12\x0e\n\x06weight\x18\x06 \x01(\t\x12\x0b\n\x03\x61ge\x18\x07 \x01(\t\x12\x12\n\nexperience\x18\x08 \x01(\x05\x12\x0f\n\x07\x63ollege\x18\t \x01(\t\"&\n\x12ListPlayersRequest\x12\x10\n\x08position\x18\x01 \x01(\t\"C\n\x13ListPlayersResponse\x12\x1f\n\x07players\x18\x01 \x03(\x0b\x32\x0e.roster.Player\x12\x0b\n\x03\x65rr\x18\x02 \x01(\t\"\x1e\n\x10GetPlayerRequest\x12\n\n\x02id\x18\x01 \x01(\x05\"@\n\x11GetPlayerResponse\x12\x1e\n\x06player\x18\x01 \x01(\x0b\x32\x0e.roster.Player\x12\x0b\n\x03\x65rr\x18\x02 \x01(\t\"3\n\x11SavePlayerRequest\x12\x1e\n\x06player\x18\x01 \x01(\x0b\x32\x0e.roster.Player\"R\n\x12SavePlayerResponse\x12\x1e\n\x06player\x18\x01 \x01(\x0b\x32\x0e.roster.Player\x12\x0f\n\x07\x63reated\x18\x02 \x01(\x08\x12\x0b\n\x03\x65rr\x18\x03 \x01(\t\"!\n\x13\x44\x65letePlayerRequest\x12\n\n\x02id\x18\x01 \x01(\x05\"#\n\x14\x44\x65letePlayerResponse\x12\x0b\n\x03\x65rr\x18\x01 \x01(\t2\xa3\x02\n\x07Players\x12\x46\n\x0bListPlayers\x12\x1a.roster.ListPlayersRequest\x1a\x1b.roster.ListPlayersResponse\x12@\n\tGetPlayer\x12\x18.roster.GetPlayerRequest\x1a\x19.roster.GetPlayerResponse\x12\x43\n\nSavePlayer\x12\x19.roster.SavePlayerRequest\x1a\x1a.roster.SavePlayerResponse\x12I\n\x0c\x44\x65letePlayer\x12\x1b.roster.DeletePlayerRequest\x1a\x1c.roster.DeletePlayerResponseb\x06proto3')

_globals = globals()
_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, _globals)
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, 'roster.proto.players_pb2', _globals)
if _descriptor._USE_C_DESCRIPTORS == False:
  DESCRIPTOR._options = None
  _globals['_PLAYER']._serialized_start=39
  _globals['_PLAYER']._serialized_end=189
  _globals['_LISTPLAYERSREQUEST']._serialized_start=191
  _globals['_LISTPLAYERSREQUEST']._serialized_end=229
  _globals['_LISTPLAYERSRESPONSE']._serialized_start=231
  _globals['_LISTPLAYERSRESPONSE']._serialized_end=298
  _globals['_GETPLAYERREQUEST']._serialized_start=300
  _globals['_GETPLAYERREQUEST']._serialized_end=330
  _globals['_GETPLAYERRESPONSE']._serialized_start=332
  _globals['_GETPLAYERRESPONSE']._serialized_end=396
  _globals['_SAVEPLAYERREQUEST']._serialized_start=398
  _globals['_SAVEPLAYERREQUEST']._serialized_end=449
  _globals['_SAVEPLAYERRESPONSE']._serialized_start=451
  _globals['_SAVEPLAYERRESPONSE']._serialized_end=533
  _globals['_DELETEPLAYERREQUEST']._serialized_start=535
  _globals['_DELETEPLAYERREQUEST']._serialized_end=568
  _globals['_DELETEPLAYERRESPONSE']._serialized_start=570
  _globals['_DELETEPLAYERRESPONSE']._serialized_end=605
  _globals['_PLAYERS']._serialized_start=608
  _globals['_PLAYERS']._serialized_end=899
# @@protoc_insertion_point(module_scope)
