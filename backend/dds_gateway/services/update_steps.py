"""
Update step builders

Typed update options -> UpdateStep, ready to be composed into a batch:

    steps = [
        volume_step(UpdateVolumeOpts(volume=VolumeOpts(size=20))),
        spec_step(UpdateSpecOpts(resize=SpecOpts(target_id=iid, target_spec_code="dds.mongodb.s6.large.2.repset"))),
    ]

Order matters: DDS rejects a flavor change while a volume resize is still running.
"""
from dds_gateway.schemas.instance import UpdateNodeNumOpts, UpdateSpecOpts, UpdateVolumeOpts
from dds_gateway.schemas.update import UpdateStep, UpdateVerb


def rename_step(name: str) -> UpdateStep:
    return UpdateStep(target="modify-name", payload_key="new_instance_name", value=name, verb=UpdateVerb.PUT)


def reset_password_step(password: str) -> UpdateStep:
    return UpdateStep(target="reset-password", payload_key="user_pwd", value=password, verb=UpdateVerb.PUT)


def volume_step(opts: UpdateVolumeOpts) -> UpdateStep:
    return UpdateStep(target="enlarge-volume", value=opts.model_dump(exclude_none=True), verb=UpdateVerb.POST)


def node_num_step(opts: UpdateNodeNumOpts) -> UpdateStep:
    return UpdateStep(target="enlarge", value=opts.model_dump(exclude_none=True), verb=UpdateVerb.POST)


def spec_step(opts: UpdateSpecOpts) -> UpdateStep:
    return UpdateStep(target="resize", value=opts.model_dump(exclude_none=True), verb=UpdateVerb.POST)


def ssl_step(enabled: bool) -> UpdateStep:
    # DDS expects "1"/"0", not a JSON boolean
    return UpdateStep(target="switch-ssl", payload_key="ssl_option", value="1" if enabled else "0", verb=UpdateVerb.POST)
