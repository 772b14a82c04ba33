# Copyright (c) Cloud Software Group, Inc.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions
# are met:
#
#   1) Redistributions of source code must retain the above copyright
#      notice, this list of conditions and the following disclaimer.
#
#   2) Redistributions in binary form must reproduce the above
#      copyright notice, this list of conditions and the following
#      disclaimer in the documentation and/or other materials
#      provided with the distribution.
#
# THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS
# "AS IS" AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT
# LIMITED TO, THE IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS
# FOR A PARTICULAR PURPOSE ARE DISCLAIMED. IN NO EVENT SHALL THE
# COPYRIGHT HOLDER OR CONTRIBUTORS BE LIABLE FOR ANY DIRECT,
# INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR CONSEQUENTIAL DAMAGES
# (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR
# SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS INTERRUPTION)
# HOWEVER CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN CONTRACT,
# STRICT LIABILITY, OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE)
# ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE, EVEN IF ADVISED
# OF THE POSSIBILITY OF SUCH DAMAGE.

"""Management of remote authentication services"""

from xenapi_bindings.api import Call, RemoteClass
from xenapi_bindings.marshal import MapOf, SetOf, String
from xenapi_bindings.refs import AuthRef


class Auth(RemoteClass):
    __wire_name__ = "auth"
    __ref__ = AuthRef

    get_subject_identifier = Call(
        ("subject_name", String), returns=String,
        doc="This call queries the external directory service to obtain "
            "the subject_identifier as a string from the human-readable "
            "subject_name")
    get_subject_information_from_identifier = Call(
        ("subject_identifier", String), returns=MapOf(String, String),
        doc="This call queries the external directory service to obtain "
            "the user information (e.g. username, organization etc) from "
            "the specified subject_identifier")
    get_group_membership = Call(
        ("subject_identifier", String), returns=SetOf(String),
        doc="This calls queries the external directory service to obtain "
            "the transitively-closed set of groups that the the "
            "subject_identifier is member of.")
